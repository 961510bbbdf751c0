import json
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hiredash import create_app
from hiredash.extensions import backend

BACKEND_URL = "http://backend.test"


class _Response:
    """The subset of requests.Response that SubmissionsClient reads."""

    def __init__(self, resp):
        self.status_code = resp.status_code
        self.text = resp.get_data(as_text=True)

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return json.loads(self.text)


class FlaskClientSession:
    """Stands in for requests.Session, routing calls through a Flask test client."""

    def __init__(self, client, base_url=BACKEND_URL):
        self.client = client
        self.base_url = base_url
        self.calls = []

    def _do(self, method, url, json=None, timeout=None):
        path = url[len(self.base_url):] if url.startswith(self.base_url) else url
        self.calls.append((method, path, json))
        return _Response(getattr(self.client, method)(path, json=json))

    def get(self, url, **kwargs):
        return self._do("get", url, **kwargs)

    def post(self, url, **kwargs):
        return self._do("post", url, **kwargs)

    def put(self, url, **kwargs):
        return self._do("put", url, **kwargs)


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "WTF_CSRF_ENABLED": False,
        "DATA_FILE": str(tmp_path / "form-submissions.json"),
        "SHORTLIST_FILE": str(tmp_path / "shortlist.json"),
        "BACKEND_URL": BACKEND_URL,
    })
    backend.session = FlaskClientSession(app.test_client())
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def data_file(app):
    return app.config["DATA_FILE"]


@pytest.fixture
def make_candidate():
    def _make(cid, name=None, availability=None, roles=()):
        return {
            "id": str(cid),
            "name": name or f"Candidate {cid}",
            "work_availability": list(availability or []),
            "work_experiences": [{"role": r, "company": "Acme"} for r in roles],
            "created_at": "2025-01-01T00:00:00.000Z",
            "reason": "",
        }
    return _make

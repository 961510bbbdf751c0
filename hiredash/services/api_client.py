import requests

from ..errors import NetworkFailure


class SubmissionsClient:
    """HTTP client for the /api/submissions endpoints.

    No retries. A request only times out when BACKEND_TIMEOUT is configured.
    """

    def __init__(self, base_url=None, session=None, timeout=None):
        self.base_url = (base_url or "").rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def init_app(self, app):
        self.base_url = (app.config.get("BACKEND_URL") or "").rstrip("/")
        self.timeout = app.config.get("BACKEND_TIMEOUT")

    def _url(self, path):
        return f"{self.base_url}{path}"

    def _call(self, method, path, **kwargs):
        try:
            r = getattr(self.session, method)(self._url(path), timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise NetworkFailure(f"{method.upper()} {path} failed: {e}") from e

        if not r.ok:
            detail = None
            try:
                body = r.json()
                if isinstance(body, dict):
                    detail = body.get("error")
            except ValueError:
                detail = r.text
            raise NetworkFailure(detail or f"Server returned {r.status_code}", status_code=r.status_code)
        try:
            return r.json()
        except ValueError as e:
            raise NetworkFailure(f"{method.upper()} {path} returned a non-JSON body") from e

    def list_candidates(self):
        data = self._call("get", "/api/submissions")
        return data if isinstance(data, list) else []

    def create_candidate(self, payload):
        data = self._call("post", "/api/submissions", json=payload)
        return data.get("candidate") or payload

    def update_reason(self, candidate_id, reason):
        data = self._call("put", f"/api/submissions/{candidate_id}", json={"reason": reason})
        return data.get("candidate")

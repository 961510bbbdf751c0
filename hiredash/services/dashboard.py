import logging
from typing import Any, Dict, List, Optional

from ..errors import NetworkFailure
from .views import derive_view, top_candidates

LOAD_FAILED = "Failed to load candidates. Is the backend running?"
NAME_REQUIRED = "Name is required"
ADD_SUCCEEDED = "Candidate added successfully"
ADD_FAILED = "Failed to add candidate. Check backend logs or network tab."


class DashboardSession:
    """State of one dashboard client.

    Holds the snapshot fetched from the record store, the in-flight flags
    and the last status messages. The shortlist and API client are injected;
    the session never writes the shortlist back to the store.
    """

    def __init__(self, client=None, shortlist=None, logger=None):
        self.client = client
        self.shortlist = shortlist
        self.logger = logger or logging.getLogger(__name__)
        self.snapshot: List[Dict[str, Any]] = []
        self.loaded = False
        self.loading = False
        self.submitting = False
        self.error_message = ""
        self.success_message = ""

    def init_app(self, app, client, shortlist):
        self.client = client
        self.shortlist = shortlist
        self.logger = app.logger

    def clear_messages(self):
        self.error_message = ""
        self.success_message = ""

    def refresh(self) -> bool:
        self.loading = True
        try:
            self.snapshot = self.client.list_candidates()
            self.loaded = True
            return True
        except NetworkFailure as e:
            self.logger.error("Failed to fetch submissions: %s", e)
            self.error_message = LOAD_FAILED
            return False
        finally:
            self.loading = False

    def ensure_loaded(self):
        if not self.loaded:
            self.refresh()

    def find(self, candidate_id) -> Optional[Dict[str, Any]]:
        for c in self.snapshot:
            if isinstance(c, dict) and c.get("id") == candidate_id:
                return c
        return None

    def add_candidate(self, name, availability=None, experiences=None) -> Optional[Dict[str, Any]]:
        self.error_message = ""
        rows = []
        for x in experiences or []:
            role = (x.get("role") or "").strip()
            company = (x.get("company") or "").strip()
            if role or company:
                rows.append({"role": role, "company": company})
        payload = {
            "name": (name or "").strip(),
            "work_availability": list(dict.fromkeys(availability or [])),
            "work_experiences": rows,
        }
        if not payload["name"]:
            self.error_message = NAME_REQUIRED
            return None

        self.submitting = True
        try:
            saved = self.client.create_candidate(payload)
        except NetworkFailure as e:
            self.logger.error("Add candidate failed: %s", e)
            self.error_message = ADD_FAILED
            return None
        finally:
            self.submitting = False

        self.snapshot = self.snapshot + [saved]
        self.success_message = ADD_SUCCEEDED
        return saved

    def view(self, query="", availability="", sort=""):
        return derive_view(self.snapshot, query=query, availability=availability, sort=sort)

    def top(self, view):
        return top_candidates(view)

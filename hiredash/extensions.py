from flask_cors import CORS
from flask_wtf.csrf import CSRFProtect

from .services.api_client import SubmissionsClient
from .services.dashboard import DashboardSession
from .services.shortlist import Shortlist, ShortlistStore
from .services.submissions import SubmissionStore


class DashboardWrapper(DashboardSession):
    """Dashboard session bound to one app's API client and shortlist file."""

    def init_app(self, app, client=None, shortlist=None):
        shortlist_store.init_app(app)
        if client is None:
            client = backend
        if shortlist is None:
            shortlist = Shortlist(shortlist_store)
        super().init_app(app, client, shortlist)
        self.snapshot = []
        self.loaded = False
        self.clear_messages()
        app.extensions["dashboard"] = self


cors = CORS()
csrf = CSRFProtect()
store = SubmissionStore()
backend = SubmissionsClient()
shortlist_store = ShortlistStore()
dashboard = DashboardWrapper()

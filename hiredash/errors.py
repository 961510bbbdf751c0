class HiringDashboardError(Exception):
    """Base class for errors raised by the dashboard and its record store."""


class InvalidInput(HiringDashboardError):
    pass


class NotFound(HiringDashboardError):
    pass


class StorageFailure(HiringDashboardError):
    pass


class ParseFailure(HiringDashboardError):
    pass


class NetworkFailure(HiringDashboardError):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ShortlistFull(HiringDashboardError):
    def __init__(self, limit):
        super().__init__(f"Shortlist limit: {limit} candidates")
        self.limit = limit

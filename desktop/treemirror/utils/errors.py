"""Custom exceptions"""


class AppError(Exception):
    """Base application error"""
    pass


class ServiceError(AppError):
    """Service layer error"""
    pass


class LoadFailure(ServiceError):
    """Tree scan failed, snapshot left unchanged"""
    pass


class StatusFetchFailure(ServiceError):
    """Status lookup failed, overlay merge aborted"""
    pass


class SelectionLoadFailure(ServiceError):
    """Initial selection fetch failed, local selection starts empty"""
    pass


class SelectionMutationFailure(ServiceError):
    """Backing store add/remove failed, local selection left as it was"""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path

class GhIssuesError(Exception):
    """Base class for all ghissues errors."""


class ConfigError(GhIssuesError):
    pass


class NetworkError(GhIssuesError):
    pass


class ApiError(GhIssuesError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(GhIssuesError):
    pass

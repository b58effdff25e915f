"""Platform API exceptions for error handling."""


class PlatformError(Exception):
    """Base exception for all platform API operations."""
    pass


class APIError(PlatformError):
    """HTTP error from the platform REST API.

    Attributes:
        status_code: HTTP status code
        message: Error message from response
        endpoint: API endpoint that failed
    """

    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(message)


class NotFoundError(APIError):
    """Remote resource does not exist."""

    def __init__(self, message: str, endpoint: str = ""):
        super().__init__(404, message, endpoint)


def is_not_found(error: BaseException) -> bool:
    """Return True if the error means the remote resource is gone."""
    return isinstance(error, APIError) and error.status_code == 404

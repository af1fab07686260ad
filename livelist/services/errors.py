"""Errors raised while fetching live data."""


class LiveApiError(Exception):
    """Raised when the live list backend cannot produce a page.

    The message is shown to the user as-is.
    """

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def describe_error(error: Exception) -> str:
    """Turn any fetch failure into a single user-facing message."""
    if isinstance(error, LiveApiError):
        return error.message
    detail = str(error) or type(error).__name__
    return f"Something went wrong: {detail}"

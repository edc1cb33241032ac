"""Common exceptions for the wb-supplies-mcp package."""

from typing import Optional


class InvalidArgumentError(ValueError):
    """Raised when a request argument exceeds a documented limit."""

    def __init__(self, message: str, limit: Optional[int] = None) -> None:
        super().__init__(message)
        self.limit = limit


class RateLimitError(Exception):
    """Raised when rate limit is exceeded."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class WBAPIError(Exception):
    """Raised when the Supplies API returns an error."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

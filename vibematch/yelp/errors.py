from __future__ import annotations


class YelpError(Exception):
    """Base class for failures talking to Yelp."""


class YelpConfigError(YelpError):
    """Raised when the client is not configured (e.g. missing API key)."""


class YelpAPIError(YelpError):
    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

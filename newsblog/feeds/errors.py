from typing import Optional


class NewsApiError(Exception):
    """Base class for failures talking to the news API."""


class NewsApiTransportError(NewsApiError):
    """The request never produced a usable body (network error, bad JSON, bad shape)."""


class NewsApiStatusError(NewsApiError):
    """The API answered with a body whose status is not "ok"."""

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None, http_status: Optional[int] = None):
        super().__init__(message or code or "news API returned an error status")
        self.message = message
        self.code = code
        self.http_status = http_status

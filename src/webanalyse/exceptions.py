"""Exception hierarchy for the page analyser."""

from typing import Optional


class WebAnalyseError(Exception):
    """Base class for analyser errors."""


class EmptyURLError(WebAnalyseError):
    """Raised when an analysis is requested without a URL."""


class FetchError(WebAnalyseError):
    """Raised when the page under analysis cannot be fetched."""
    def __init__(self, url: str, message: str, cause: Optional[BaseException] = None):
        self.url = url
        self.message = message
        self.cause = cause
        super().__init__(message)


class NotOkResponseError(FetchError):
    """Raised when the page under analysis answers with a non-200 status."""
    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"status code is {status_code}")


class MalformedReferenceError(WebAnalyseError):
    """Raised when a hyperlink reference cannot be parsed as a URL."""
    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(f"invalid url {reference!r}: {reason}")

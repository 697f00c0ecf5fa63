"""
services/exceptions.py – Error hierarchy for catalogue fetches.

Every failure raised by a fetch derives from FetchError so callers can catch
broadly, or branch on TransportError (worth retrying) versus DecodeError
(never worth retrying).
"""

from typing import Optional


class FetchError(Exception):
    """
    Base class for all fetch failures.

    Attributes
    ----------
    message : Human-readable description, including the underlying cause.
    url     : The URL being fetched, when known.
    """

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        self.message = message
        self.url = url
        super().__init__(message)


class TransportError(FetchError):
    """
    Raised when the request fails or the server answers with a non-success
    status.

    Attributes
    ----------
    status_code : HTTP status of the failed response, or None when no
                  response was received.
    """

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, url=url)


class DecodeError(FetchError):
    """Raised when a response body is malformed or does not match the schema."""

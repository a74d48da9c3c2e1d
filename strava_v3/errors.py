"""Central error types used across the client."""

from __future__ import annotations


class StravaAPIError(RuntimeError):
    """Base error for Strava API failures."""


class StravaUnauthorizedError(StravaAPIError):
    """Raised on HTTP 401: token missing, expired, or lacking scope."""


class StravaBadRequestError(StravaAPIError):
    """Raised on HTTP 400; ``message`` carries the raw response body."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StravaTransportError(StravaAPIError):
    """Raised when the request fails on the wire or the body cannot be decoded.

    The underlying exception is available as ``__cause__``.
    """


class MissingCredentialError(StravaAPIError):
    """Raised when a credential expected in the environment is absent."""


class StravaIOError(StravaAPIError):
    """Raised when a local file needed for a request cannot be read."""


__all__ = [
    "StravaAPIError",
    "StravaUnauthorizedError",
    "StravaBadRequestError",
    "StravaTransportError",
    "MissingCredentialError",
    "StravaIOError",
]

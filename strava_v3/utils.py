"""Helpers for keeping secrets out of log output."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SECRET_PARAMS = {"access_token", "refresh_token", "client_secret"}


def mask_tail(value: str | None, visible: int = 4) -> str:
    """Return ``value`` masked, keeping the trailing ``visible`` chars of longer values."""

    if not value:
        return ""
    if visible <= 0 or len(value) <= visible:
        return "****"
    tail = value[-visible:]
    return f"****{tail}"


def redact_url(url: str) -> str:
    """Mask secret query parameters (``access_token`` etc.) in ``url``."""

    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [
        (key, mask_tail(value) if key in _SECRET_PARAMS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))

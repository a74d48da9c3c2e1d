"""Versioned Strava API URL construction."""

from __future__ import annotations

from ..auth import AccessToken
from ..config import STRAVA_BASE_URL


def build_url(token: AccessToken | None, path: str) -> str:
    """Return ``STRAVA_BASE_URL/<path>``, with ``?access_token=`` when ``token`` is given.

    ``path`` is not escaped; pass numeric IDs or fixed literals only. The
    token is sent as a query parameter rather than an Authorization header.
    """

    url = f"{STRAVA_BASE_URL}/{path}"
    if token is None:
        return url
    return f"{url}?access_token={token.secret}"

"""Strava OAuth credentials.

A :class:`RefreshToken` is the long-lived credential issued when an athlete
authorises an application; it is exchanged for a short-lived
:class:`AccessToken`, which every authorised API call needs. Tokens are
immutable values passed explicitly to each accessor; nothing here tracks
expiry. An expired token surfaces as ``StravaUnauthorizedError`` on the
next call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .config import (
    STRAVA_ACCESS_TOKEN_ENV,
    STRAVA_CLIENT_ID_ENV,
    STRAVA_CLIENT_SECRET_ENV,
    STRAVA_REFRESH_TOKEN_ENV,
)
from .errors import MissingCredentialError
from .utils import mask_tail

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class RefreshToken:
    """A strava.com refresh token plus the OAuth client that owns it.

    Register an application at https://www.strava.com/settings/api to get a
    client id and secret.
    """

    refresh_token: str = field(repr=False)
    client_id: str
    client_secret: str = field(repr=False)

    @classmethod
    def from_environment(cls) -> "RefreshToken":
        """Build from ``STRAVA_REFRESH_TOKEN``/``STRAVA_CLIENT_ID``/``STRAVA_CLIENT_SECRET``."""

        names = (
            STRAVA_REFRESH_TOKEN_ENV,
            STRAVA_CLIENT_ID_ENV,
            STRAVA_CLIENT_SECRET_ENV,
        )
        values = {name: os.getenv(name) for name in names}
        missing = [name for name, value in values.items() if value is None]
        if missing:
            raise MissingCredentialError(
                f"Environment variable(s) not set: {', '.join(missing)}"
            )
        return cls(
            refresh_token=values[STRAVA_REFRESH_TOKEN_ENV],
            client_id=values[STRAVA_CLIENT_ID_ENV],
            client_secret=values[STRAVA_CLIENT_SECRET_ENV],
        )

    def __str__(self) -> str:
        return mask_tail(self.refresh_token)


@dataclass(frozen=True)
class AccessToken:
    """A strava.com access token. Required for all requests except the refresh exchange."""

    access_token: str = field(repr=False)
    refresh_token: RefreshToken | None = None

    @classmethod
    def new(cls, secret: str) -> "AccessToken":
        """Wrap ``secret`` in a token with no associated refresh token."""

        return cls(access_token=secret)

    @classmethod
    def from_environment(cls) -> "AccessToken":
        """Create a token from the ``STRAVA_ACCESS_TOKEN`` environment variable."""

        secret = os.getenv(STRAVA_ACCESS_TOKEN_ENV)
        if secret is None:
            raise MissingCredentialError(
                f"Environment variable {STRAVA_ACCESS_TOKEN_ENV} is not set"
            )
        return cls.new(secret)

    @classmethod
    async def refresh(
        cls,
        refresh_token: RefreshToken,
        *,
        client: "httpx.AsyncClient | None" = None,
    ) -> "AccessToken":
        """Exchange ``refresh_token`` for a fresh access token."""

        from .strava_client.http import refresh_tokens  # local import

        return await refresh_tokens(refresh_token, client=client)

    @property
    def secret(self) -> str:
        """The bearer string embedded in request URLs."""

        return self.access_token

    def __str__(self) -> str:
        return mask_tail(self.access_token)


__all__ = ["AccessToken", "RefreshToken"]

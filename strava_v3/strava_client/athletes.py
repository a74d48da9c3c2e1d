"""Athlete endpoints."""

from __future__ import annotations

import httpx

from ..auth import AccessToken
from ..models import Athlete
from .base import build_url
from .http import get


async def get_authenticated_athlete(
    token: AccessToken,
    *,
    client: httpx.AsyncClient | None = None,
) -> Athlete:
    """Fetch the athlete who owns ``token``."""

    url = build_url(token, "athlete")
    return await get(url, Athlete.from_dict, client=client, context="Athlete fetch")

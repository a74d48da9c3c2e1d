"""Activity endpoints."""

from __future__ import annotations

from typing import List

import httpx

from ..auth import AccessToken
from ..models import Activity
from .base import build_url
from .http import get


async def get_activity(
    token: AccessToken,
    activity_id: int | str,
    *,
    client: httpx.AsyncClient | None = None,
) -> Activity:
    """Fetch a single activity (detailed representation when owned by the athlete)."""

    url = build_url(token, f"activities/{activity_id}")
    return await get(url, Activity.from_dict, client=client, context="Activity fetch")


async def list_athlete_activities(
    token: AccessToken,
    *,
    client: httpx.AsyncClient | None = None,
) -> List[Activity]:
    """List the authenticated athlete's activities (summary representations)."""

    url = build_url(token, "athlete/activities")
    return await get(
        url,
        lambda data: [Activity.from_dict(item) for item in data],
        client=client,
        context="Athlete activities",
    )

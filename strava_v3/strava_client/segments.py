"""Segment endpoints."""

from __future__ import annotations

import httpx

from ..auth import AccessToken
from ..models import Segment
from .base import build_url
from .http import get


async def get_segment(
    token: AccessToken,
    segment_id: int,
    *,
    client: httpx.AsyncClient | None = None,
) -> Segment:
    url = build_url(token, f"segments/{segment_id}")
    return await get(url, Segment.from_dict, client=client, context="Segment fetch")

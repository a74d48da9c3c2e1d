"""Athlete attempts at a segment."""

from __future__ import annotations

import httpx

from ..auth import AccessToken
from ..models import SegmentEffort
from .base import build_url
from .http import get
from .pagination import Paginated


async def list_segment_efforts(
    token: AccessToken,
    segment_id: int,
    *,
    client: httpx.AsyncClient | None = None,
) -> Paginated[SegmentEffort]:
    """List the first page of efforts recorded on ``segment_id``.

    Filtering by athlete or date range is not supported.
    """

    url = build_url(token, f"segments/{segment_id}/all_efforts")
    efforts = await get(
        url,
        lambda data: [SegmentEffort.from_dict(item) for item in data],
        client=client,
        context="Segment efforts",
    )
    return Paginated(url=url, data=efforts)


async def get_segment_effort(
    token: AccessToken,
    effort_id: int,
    *,
    client: httpx.AsyncClient | None = None,
) -> SegmentEffort:
    url = build_url(token, f"segment_efforts/{effort_id}")
    return await get(
        url, SegmentEffort.from_dict, client=client, context="Segment effort fetch"
    )

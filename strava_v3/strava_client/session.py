"""HTTP client factory for Strava API calls."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from ..config import DEFAULT_HEADERS, REQUEST_TIMEOUT

__all__ = ["create_default_client", "client_scope"]


def create_default_client(**kwargs) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` with the Strava default headers.

    No timeout is set unless one is passed explicitly.
    """

    kwargs.setdefault("timeout", REQUEST_TIMEOUT)
    headers = dict(DEFAULT_HEADERS)
    headers.update(kwargs.pop("headers", None) or {})
    return httpx.AsyncClient(headers=headers, **kwargs)


@asynccontextmanager
async def client_scope(
    client: httpx.AsyncClient | None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield ``client`` untouched, or a fresh client closed on exit."""

    if client is not None:
        yield client
        return
    async with create_default_client() as owned:
        yield owned

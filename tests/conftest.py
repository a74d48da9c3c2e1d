"""Global pytest fixtures & helpers.

Adds project root to path and provides an ``httpx.MockTransport``-backed
client factory so tests never touch the network.
"""
from __future__ import annotations

import os
import sys

import httpx
import pytest
import pytest_asyncio

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from strava_v3.auth import AccessToken


# --- Factory helpers -------------------------------------------------
def make_client(handler):
    """Return an AsyncClient whose requests are answered by ``handler``."""

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def make_activity(activity_id=1, **overrides):
    data = {
        "id": activity_id,
        "resource_state": 2,
        "name": "Morning Run",
        "distance": 5012.4,
        "moving_time": 1500,
        "elapsed_time": 1560,
        "type": "Run",
        "sport_type": "Run",
        "start_latlng": [51.5, -0.12],
        "end_latlng": [],
        "athlete": {"id": 99, "resource_state": 1},
    }
    data.update(overrides)
    return data


def make_effort(effort_id=1, **overrides):
    data = {
        "id": effort_id,
        "resource_state": 2,
        "name": "Hill Climb",
        "activity": {"id": 555, "resource_state": 1},
        "athlete": {"id": 99, "resource_state": 1},
        "elapsed_time": 300 + effort_id,
        "segment": {"id": 646257, "resource_state": 2, "activity_type": "Ride"},
        "kom_rank": None,
        "pr_rank": 2,
    }
    data.update(overrides)
    return data


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def token():
    return AccessToken.new("T")


@pytest_asyncio.fixture
async def unauthorized_client():
    """Client answering 401 with a body that could never parse as a DTO."""

    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(401, content=b"not json at all")

    client = make_client(handler)
    client.seen = seen
    yield client
    await client.aclose()


@pytest.fixture
def activity_factory():
    return make_activity


@pytest.fixture
def effort_factory():
    return make_effort


@pytest_asyncio.fixture
async def mock_client():
    """Factory for mock-backed clients; every client it hands out is closed afterwards."""

    clients = []

    def factory(handler):
        client = make_client(handler)
        clients.append(client)
        return client

    yield factory
    for client in clients:
        await client.aclose()

"""Async HTTP transport for the Strava API.

Every call is exactly one round trip: no retries, no caching, no timeout
beyond whatever the supplied client carries. Swapping the HTTP library only
requires touching this module and :mod:`.session`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Tuple, TypeVar

import httpx

from ..auth import AccessToken, RefreshToken
from ..config import OAUTH_TOKEN_PATH
from ..errors import StravaTransportError
from ..utils import mask_tail, redact_url
from .base import build_url
from .response_handling import parse_body, raise_for_status_code
from .session import client_scope

T = TypeVar("T")

FileSpec = Tuple[str, Any]

LOGGER = logging.getLogger(__name__)

__all__ = ["get", "post_multipart", "refresh_tokens"]


async def _send(
    client: httpx.AsyncClient | None,
    method: str,
    url: str,
    context: str,
    **kwargs: Any,
) -> httpx.Response:
    LOGGER.debug("%s %s %s", context, method, redact_url(url))
    async with client_scope(client) as http:
        try:
            response = await http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise StravaTransportError(
                f"{context} network error: {exc.__class__.__name__}"
            ) from exc
    LOGGER.debug("%s status=%s", context, response.status_code)
    return response


async def get(
    url: str,
    parse: Callable[[Any], T],
    *,
    client: httpx.AsyncClient | None = None,
    context: str = "GET",
) -> T:
    """GET ``url`` and parse the JSON body with ``parse``.

    Raises:
        StravaUnauthorizedError: On HTTP 401; the body is not parsed.
        StravaTransportError: On network failure or an undecodable body.
    """

    response = await _send(client, "GET", url, context)
    raise_for_status_code(response, context, bad_request=False)
    return parse_body(response, parse, context)


async def post_multipart(
    url: str,
    fields: Mapping[str, str],
    files: Mapping[str, FileSpec],
    parse: Callable[[Any], T],
    *,
    client: httpx.AsyncClient | None = None,
    context: str = "POST",
) -> T:
    """POST a multipart body built from text ``fields`` and ``files``.

    Raises:
        StravaUnauthorizedError: On HTTP 401.
        StravaBadRequestError: On HTTP 400, carrying the response text.
        StravaTransportError: On network failure or an undecodable body.
    """

    response = await _send(
        client, "POST", url, context, data=dict(fields), files=dict(files)
    )
    raise_for_status_code(response, context)
    return parse_body(response, parse, context)


async def refresh_tokens(
    refresh_token: RefreshToken,
    *,
    client: httpx.AsyncClient | None = None,
) -> AccessToken:
    """Exchange ``refresh_token`` for a new :class:`AccessToken`.

    Raises:
        StravaUnauthorizedError: When Strava rejects the credentials (401).
        StravaBadRequestError: On HTTP 400 (e.g. malformed refresh token).
        StravaTransportError: On network failure or an unexpected body.
    """

    context = "Token refresh"
    url = build_url(None, OAUTH_TOKEN_PATH)
    payload: Dict[str, str] = {
        "client_id": refresh_token.client_id,
        "client_secret": refresh_token.client_secret,
        "grant_type": "refresh_token",
        "refresh_token": refresh_token.refresh_token,
    }
    LOGGER.info(
        "Refreshing Strava token client_id=%s refresh_token=%s",
        refresh_token.client_id,
        mask_tail(refresh_token.refresh_token),
    )
    response = await _send(client, "POST", url, context, data=payload)
    raise_for_status_code(response, context)

    def to_access_token(data: Mapping[str, Any]) -> AccessToken:
        rotated = data.get("refresh_token")
        return AccessToken(
            access_token=data["access_token"],
            refresh_token=(
                RefreshToken(
                    refresh_token=rotated,
                    client_id=refresh_token.client_id,
                    client_secret=refresh_token.client_secret,
                )
                if rotated
                else None
            ),
        )

    token = parse_body(response, to_access_token, context)
    LOGGER.info(
        "Token refresh access_token_len=%s refresh_token_changed=%s",
        len(token.access_token),
        bool(
            token.refresh_token
            and token.refresh_token.refresh_token != refresh_token.refresh_token
        ),
    )
    return token

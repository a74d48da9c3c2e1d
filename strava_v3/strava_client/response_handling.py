"""Shared HTTP response helpers for Strava API interactions.

Every transport operation routes its response through
:func:`raise_for_status_code` before touching the body, so an error payload
is never parsed as the success DTO.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, TypeVar

import httpx

from ..errors import (
    StravaBadRequestError,
    StravaTransportError,
    StravaUnauthorizedError,
)
from ..utils import redact_url

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)

__all__ = [
    "extract_error_text",
    "parse_body",
    "raise_for_status_code",
]


def raise_for_status_code(
    response: httpx.Response,
    context: str,
    *,
    bad_request: bool = True,
) -> None:
    """Raise the taxonomy error for ``response``'s status, if any.

    401 always maps to :class:`StravaUnauthorizedError`. 400 maps to
    :class:`StravaBadRequestError` carrying the raw body unless
    ``bad_request`` is False (plain GETs leave 400 to the body parser, as
    Strava has always done for them). Any other status, including other
    non-2xx codes, falls through to body parsing.
    """

    status = response.status_code
    if status == httpx.codes.UNAUTHORIZED:
        LOGGER.debug(
            "%s unauthorized url=%s", context, redact_url(str(response.request.url))
        )
        raise StravaUnauthorizedError(f"{context} unauthorized (status 401)")
    if bad_request and status == httpx.codes.BAD_REQUEST:
        LOGGER.debug("%s bad request detail=%s", context, extract_error_text(response))
        raise StravaBadRequestError(response.text)


def parse_body(response: httpx.Response, parse: Callable[[Any], T], context: str) -> T:
    """Decode the JSON body and hand it to ``parse``.

    Decode errors and payloads that do not fit the target shape become
    :class:`StravaTransportError`.
    """

    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise StravaTransportError(
            f"{context} returned non-JSON payload (status {response.status_code})"
        ) from exc
    try:
        return parse(data)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise StravaTransportError(
            f"{context} payload did not match the expected shape "
            f"(status {response.status_code}): {exc!r}"
        ) from exc


def extract_error_text(resp: httpx.Response) -> str | None:
    """Best-effort, trimmed plain-text body for log lines."""

    trimmed = resp.text.strip()
    if not trimmed:
        return None
    return (trimmed[:297] + "...") if len(trimmed) > 300 else trimmed

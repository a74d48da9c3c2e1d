"""Activity file uploads and their processing status."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import httpx

from ..auth import AccessToken
from ..config import UPLOAD_FILE_FIELD, UPLOAD_FILE_NAME
from ..errors import StravaIOError
from ..models import CreateUpload, Upload
from .base import build_url
from .http import get, post_multipart

LOGGER = logging.getLogger(__name__)


def _flag(value: bool) -> str:
    return "1" if value else "0"


def build_upload_form(upload: CreateUpload) -> Dict[str, str]:
    """Return the text fields of the multipart upload form.

    Optional values are only included when set; booleans become ``"1"``/``"0"``.
    """

    form = {
        "data_type": upload.data_type.value,
        "external_id": upload.external_id,
    }
    if upload.name is not None:
        form["name"] = upload.name
    if upload.description is not None:
        form["description"] = upload.description
    if upload.trainer is not None:
        form["trainer"] = _flag(upload.trainer)
    if upload.commute is not None:
        form["commute"] = _flag(upload.commute)
    return form


async def get_upload(
    token: AccessToken,
    upload_id: int,
    *,
    client: httpx.AsyncClient | None = None,
) -> Upload:
    """Fetch the processing status of an upload."""

    url = build_url(token, f"uploads/{upload_id}")
    return await get(url, Upload.from_dict, client=client, context="Upload status")


async def create_upload(
    token: AccessToken,
    upload: CreateUpload,
    data: str | bytes,
    *,
    client: httpx.AsyncClient | None = None,
) -> Upload:
    """Submit an activity file; Strava processes it asynchronously.

    Poll :func:`get_upload` with the returned ``id`` to learn the outcome.
    """

    url = build_url(token, "uploads")
    payload = data.encode("utf-8") if isinstance(data, str) else data
    LOGGER.debug(
        "Uploading external_id=%s data_type=%s bytes=%s",
        upload.external_id,
        upload.data_type.value,
        len(payload),
    )
    return await post_multipart(
        url,
        build_upload_form(upload),
        {UPLOAD_FILE_FIELD: (UPLOAD_FILE_NAME, payload)},
        Upload.from_dict,
        client=client,
        context="Upload create",
    )


async def create_upload_from_file(
    token: AccessToken,
    upload: CreateUpload,
    path: str | Path,
    *,
    client: httpx.AsyncClient | None = None,
) -> Upload:
    """Read ``path`` and submit it via :func:`create_upload`."""

    try:
        payload = Path(path).read_bytes()
    except OSError as exc:
        raise StravaIOError(f"Could not read upload file {path}: {exc}") from exc
    return await create_upload(token, upload, payload, client=client)

import httpx
import pytest

from strava_v3.errors import StravaBadRequestError, StravaIOError
from strava_v3.models import CreateUpload, DataType
from strava_v3.strava_client.uploads import (
    build_upload_form,
    create_upload,
    create_upload_from_file,
)


def test_form_includes_only_set_fields():
    upload = CreateUpload(
        data_type=DataType.GPX_GZ,
        external_id="garmin-123",
        name=None,
        trainer=True,
    )
    form = build_upload_form(upload)
    assert form == {"data_type": "gpx_gz", "external_id": "garmin-123", "trainer": "1"}
    assert "name" not in form


def test_form_serialises_false_flags():
    upload = CreateUpload(
        data_type=DataType.TCX,
        external_id="x",
        name="Lunch Ride",
        description="windy",
        trainer=False,
        commute=False,
    )
    assert build_upload_form(upload) == {
        "data_type": "tcx",
        "external_id": "x",
        "name": "Lunch Ride",
        "description": "windy",
        "trainer": "0",
        "commute": "0",
    }


@pytest.mark.asyncio
async def test_create_upload_sends_form(token, mock_client):
    captured = {}

    def handler(request):
        captured["url"] = str(request.url)
        captured["body"] = request.content
        return httpx.Response(
            201,
            json={"id": 7, "id_str": "7", "external_id": "ext", "status": "Your activity is still being processed."},
        )

    upload = CreateUpload(data_type=DataType.FIT, external_id="ext", trainer=True)
    result = await create_upload(token, upload, "raw-data", client=mock_client(handler))

    assert captured["url"] == "https://www.strava.com/api/v3/uploads?access_token=T"
    body = captured["body"]
    assert b'name="trainer"\r\n\r\n1\r\n' in body
    assert b'name="name"' not in body
    assert b'filename="file"' in body
    assert b"raw-data" in body
    assert result.id == 7


@pytest.mark.asyncio
async def test_create_upload_bad_request(token, mock_client):
    def handler(request):
        return httpx.Response(400, text="invalid distance")

    upload = CreateUpload(data_type=DataType.FIT, external_id="ext")
    with pytest.raises(StravaBadRequestError) as excinfo:
        await create_upload(token, upload, b"x", client=mock_client(handler))
    assert excinfo.value.message == "invalid distance"
    assert str(excinfo.value) == "invalid distance"


@pytest.mark.asyncio
async def test_create_upload_from_file(tmp_path, token, mock_client):
    path = tmp_path / "ride.gpx"
    path.write_bytes(b"<gpx>ride</gpx>")
    captured = {}

    def handler(request):
        captured["body"] = request.content
        return httpx.Response(201, json={"id": 3})

    upload = CreateUpload(data_type=DataType.GPX, external_id="ride")
    result = await create_upload_from_file(token, upload, path, client=mock_client(handler))
    assert result.id == 3
    assert b"<gpx>ride</gpx>" in captured["body"]


@pytest.mark.asyncio
async def test_create_upload_from_missing_file(tmp_path, token, mock_client):
    def handler(request):
        raise AssertionError("no request expected")

    upload = CreateUpload(data_type=DataType.GPX, external_id="ride")
    with pytest.raises(StravaIOError):
        await create_upload_from_file(
            token, upload, tmp_path / "missing.gpx", client=mock_client(handler)
        )

import httpx
import pytest

from strava_v3.errors import (
    StravaBadRequestError,
    StravaTransportError,
    StravaUnauthorizedError,
)
from strava_v3.strava_client import http


def _never_called(data):
    raise AssertionError("body must not be parsed")


@pytest.mark.asyncio
async def test_get_parses_json(mock_client):
    def handler(request):
        assert request.method == "GET"
        return httpx.Response(200, json={"id": 5})

    result = await http.get(
        "https://www.strava.com/api/v3/x", lambda d: d["id"], client=mock_client(handler)
    )
    assert result == 5


@pytest.mark.asyncio
async def test_get_401_skips_parsing(mock_client):
    def handler(request):
        return httpx.Response(401, json={"id": 5})

    with pytest.raises(StravaUnauthorizedError):
        await http.get("https://www.strava.com/api/v3/x", _never_called, client=mock_client(handler))


@pytest.mark.asyncio
async def test_get_other_status_is_parsed_as_success(mock_client):
    def handler(request):
        return httpx.Response(500, json={"id": 8})

    result = await http.get(
        "https://www.strava.com/api/v3/x", lambda d: d["id"], client=mock_client(handler)
    )
    assert result == 8


@pytest.mark.asyncio
async def test_get_error_body_fails_as_transport_error(mock_client):
    def handler(request):
        return httpx.Response(404, json={"message": "Record Not Found"})

    with pytest.raises(StravaTransportError) as excinfo:
        await http.get(
            "https://www.strava.com/api/v3/x", lambda d: d["id"], client=mock_client(handler)
        )
    assert isinstance(excinfo.value.__cause__, KeyError)


@pytest.mark.asyncio
async def test_get_non_json_body(mock_client):
    def handler(request):
        return httpx.Response(200, text="<html>down for maintenance</html>")

    with pytest.raises(StravaTransportError):
        await http.get("https://www.strava.com/api/v3/x", dict, client=mock_client(handler))


@pytest.mark.asyncio
async def test_network_failure_wraps_httpx_error(mock_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(StravaTransportError) as excinfo:
        await http.get("https://www.strava.com/api/v3/x", dict, client=mock_client(handler))
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_post_multipart_status_mapping(mock_client):
    def unauthorized(request):
        return httpx.Response(401)

    def bad_request(request):
        return httpx.Response(400, text="invalid distance")

    url = "https://www.strava.com/api/v3/uploads"
    files = {"file": ("file", b"payload")}
    with pytest.raises(StravaUnauthorizedError):
        await http.post_multipart(url, {}, files, _never_called, client=mock_client(unauthorized))
    with pytest.raises(StravaBadRequestError) as excinfo:
        await http.post_multipart(url, {}, files, _never_called, client=mock_client(bad_request))
    assert excinfo.value.message == "invalid distance"


@pytest.mark.asyncio
async def test_post_multipart_sends_fields_and_file(mock_client):
    captured = {}

    def handler(request):
        captured["content_type"] = request.headers["content-type"]
        captured["body"] = request.content
        return httpx.Response(201, json={"id": 1})

    result = await http.post_multipart(
        "https://www.strava.com/api/v3/uploads",
        {"data_type": "gpx"},
        {"file": ("file", b"<gpx/>")},
        lambda d: d["id"],
        client=mock_client(handler),
    )
    assert result == 1
    assert captured["content_type"].startswith("multipart/form-data")
    assert b'name="data_type"' in captured["body"]
    assert b'name="file"; filename="file"' in captured["body"]
    assert b"<gpx/>" in captured["body"]


@pytest.mark.asyncio
async def test_default_client_is_created_when_none_given(monkeypatch, mock_client):
    created = []

    def fake_factory(**kwargs):
        client = mock_client(lambda request: httpx.Response(200, json=[]))
        created.append(client)
        return client

    monkeypatch.setattr("strava_v3.strava_client.session.create_default_client", fake_factory)
    result = await http.get("https://www.strava.com/api/v3/x", list)
    assert result == []
    assert len(created) == 1
    assert created[0].is_closed


@pytest.mark.asyncio
async def test_caller_supplied_client_is_left_open(mock_client):
    client = mock_client(lambda request: httpx.Response(200, json={"id": 1}))
    await http.get("https://www.strava.com/api/v3/x", dict, client=client)
    assert not client.is_closed

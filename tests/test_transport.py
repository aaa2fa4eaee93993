"""
Тесты для HTTP-транспорта на httpx
"""
import logging

import httpx
import pytest

from pets_client.config.config import EnvSettings
from pets_client.pets_service.common import FormBody
from pets_client.pets_service.pets_client import PetsClient
from pets_client.pets_service.transport import HttpxTransport


BASE_URL = "http://pets.test/api"


def make_transport(handler, token="secret"):
    return HttpxTransport(
        base_url=BASE_URL, token=token, transport=httpx.MockTransport(handler)
    )


async def test_get_sends_auth_and_returns_envelope():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"details": {"items": [], "page_details": False}})

    transport = make_transport(handler)
    envelope = await transport.get("/pets?limit=5")
    await transport.close()

    assert seen == {"url": f"{BASE_URL}/pets?limit=5", "auth": "Bearer secret"}
    assert envelope == {"details": {"items": [], "page_details": False}}


async def test_post_sends_multipart_form():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = request.read()
        return httpx.Response(201, json={"details": {"edit_id": "e1", "view_id": "v1"}})

    transport = make_transport(handler)
    body = FormBody(
        data={"pet_name": "Toby"},
        files={"pet_photo_0": ("dog.png", b"PNGDATA", "image/png")},
    )
    envelope = await transport.post("/pets", body)
    await transport.close()

    assert seen["method"] == "POST"
    assert seen["content_type"].startswith("multipart/form-data")
    assert b"Toby" in seen["body"]
    assert b"PNGDATA" in seen["body"]
    assert envelope["details"]["view_id"] == "v1"


async def test_delete_with_empty_response():
    transport = make_transport(lambda request: httpx.Response(204))
    assert await transport.delete("/pets/e1") == {}
    await transport.close()


async def test_http_error_is_propagated():
    """Ошибки HTTP не оборачиваются и не повторяются"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(404, json={"message": "Not found"})

    transport = make_transport(handler)
    with pytest.raises(httpx.HTTPStatusError):
        await transport.get("/pets/single/nope")
    await transport.close()
    assert len(calls) == 1


async def test_request_error_is_propagated():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = make_transport(handler)
    with pytest.raises(httpx.ConnectError):
        await transport.get("/pets")
    await transport.close()


async def test_client_builds_transport_from_settings():
    settings = EnvSettings(PETS_API_BASE_URL=BASE_URL, PETS_API_TIMEOUT=3.0)
    client = PetsClient(token="abc", settings=settings)

    assert isinstance(client._transport, HttpxTransport)
    assert client._transport.base_url == BASE_URL
    assert client._transport.timeout == 3.0
    await client.close()


async def test_debug_log_has_no_field_values(caplog):
    """В лог попадают только имена полей, без контактов владельца"""
    transport = make_transport(lambda request: httpx.Response(200, json={"details": {}}))
    body = FormBody(data={"owner_email": "ana@petmail.org", "owner_phone": "600123456"})

    with caplog.at_level(logging.DEBUG, logger="pets_client.pets_service.transport"):
        await transport.put("/pets/e1", body)
    await transport.close()

    assert "owner_email" in caplog.text
    assert "ana@petmail.org" not in caplog.text
    assert "600123456" not in caplog.text

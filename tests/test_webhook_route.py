"""Tests for the FastAPI webhook receiver."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from conftest import WEBHOOK_SECRET, make_delivery
from treezor.api.webhooks import create_webhook_router
from treezor.events.payloads import UserEvent
from treezor.events.signature import sign_payload

USER_PAYLOAD = '{"users":[{"userId":"1"}]}'
JSON = {"Content-Type": "application/json"}


@pytest.mark.asyncio
async def test_valid_delivery(client, received):
    response = await client.post("/webhooks/treezor", content=make_delivery("user.create", USER_PAYLOAD), headers=JSON)
    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert len(received) == 1
    event, payload = received[0]
    assert event.webhook == "user.create"
    assert isinstance(payload, UserEvent)
    assert payload.user.user_id == "1"


@pytest.mark.asyncio
async def test_bad_signature_is_forbidden(client, received):
    body = make_delivery("user.create", USER_PAYLOAD, signature=sign_payload(b"x", WEBHOOK_SECRET))
    response = await client.post("/webhooks/treezor", content=body, headers=JSON)
    assert response.status_code == 403
    assert received == []


@pytest.mark.asyncio
async def test_missing_payload_is_bad_request(client, received):
    response = await client.post(
        "/webhooks/treezor",
        content=b'{"webhook":"user.create","object_payload_signature":"abc="}',
        headers=JSON,
    )
    assert response.status_code == 400
    assert "missing payload" in response.json()["detail"]
    assert received == []


@pytest.mark.asyncio
async def test_unsupported_content_type(client):
    response = await client.post(
        "/webhooks/treezor",
        content=make_delivery("user.create", USER_PAYLOAD),
        headers={"Content-Type": "application/xml"},
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_text_plain_accepted(client, received):
    response = await client.post(
        "/webhooks/treezor",
        content=make_delivery("kycliveness.create", '{"kyc-status":"processed"}'),
        headers={"Content-Type": "text/plain"},
    )
    assert response.status_code == 200
    assert received[0][1].kyc_status == "processed"


@pytest.mark.asyncio
async def test_undecodable_known_payload(client, received):
    response = await client.post(
        "/webhooks/treezor",
        content=make_delivery("user.create", '{"users":"nope"}'),
        headers=JSON,
    )
    assert response.status_code == 422
    assert received == []


@pytest.mark.asyncio
async def test_out_of_range_timestamp_is_unprocessable(client, received):
    response = await client.post(
        "/webhooks/treezor",
        content=make_delivery("user.create", '{"users":[{"createdDate":"0001-01-01 00:00:00"}]}'),
        headers=JSON,
    )
    assert response.status_code == 422
    assert "TimestampParis" in response.json()["detail"]
    assert received == []


@pytest.mark.asyncio
async def test_user_without_parent_accepted(client, received):
    response = await client.post(
        "/webhooks/treezor",
        content=make_delivery("user.update", '{"users":[{"userId":"1","parentType":""}]}'),
        headers=JSON,
    )
    assert response.status_code == 200
    assert received[0][1].user.parent_type is None


@pytest.mark.asyncio
async def test_async_handler_and_custom_path():
    seen = []

    async def handler(event, payload):
        seen.append(event.webhook)

    app = FastAPI()
    app.include_router(create_webhook_router(handler, secret=WEBHOOK_SECRET, path="/hooks"))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.post("/hooks", content=make_delivery("wallet.create", '{"wallets":[]}'), headers=JSON)
    assert response.status_code == 200
    assert seen == ["wallet.create"]


@pytest.mark.asyncio
async def test_missing_secret_configuration():
    app = FastAPI()
    app.include_router(create_webhook_router(lambda event, payload: None, secret=""))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.post("/webhooks/treezor", content=make_delivery("user.create", USER_PAYLOAD), headers=JSON)
    assert response.status_code == 500

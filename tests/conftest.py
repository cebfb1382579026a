"""Shared test fixtures."""

import time

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from treezor.api.webhooks import create_webhook_router
from treezor.events.signature import sign_payload

WEBHOOK_SECRET = "test-webhook-secret"


def make_delivery(event_type: str, payload_text: str, secret: str = WEBHOOK_SECRET, signature: str | None = None) -> bytes:
    """Build a webhook body embedding ``payload_text`` verbatim, signed over its bytes."""
    if signature is None:
        signature = sign_payload(payload_text.encode("utf-8"), secret)
    return (
        '{"webhook_id": "wh_1", "webhook": "%s", "object": "%s", "object_id": "42", '
        '"object_payload": %s, "object_payload_signature": "%s"}'
        % (event_type, event_type.split(".")[0], payload_text, signature)
    ).encode("utf-8")


@pytest.fixture
def webhook_secret():
    return WEBHOOK_SECRET


@pytest.fixture
def host_zone(monkeypatch):
    """Switch the process-local time zone for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available on this platform")

    def _set(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def received():
    """Deliveries passed to the webhook handler, in order."""
    return []


@pytest.fixture
def app(received):
    """Test application mounting the webhook router with a recording handler."""
    _app = FastAPI()

    def handler(event, payload):
        received.append((event, payload))

    _app.include_router(create_webhook_router(handler, secret=WEBHOOK_SECRET))
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

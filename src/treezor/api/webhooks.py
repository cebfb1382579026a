"""FastAPI route receiving Treezor webhook deliveries."""

import inspect
import logging
from typing import Any, Callable

from fastapi import APIRouter, HTTPException, Request

from treezor.config import settings
from treezor.errors.exceptions import WebhookDispatchError, WebhookSignatureError, WebhookStructureError
from treezor.events.webhook import process_webhook

logger = logging.getLogger(__name__)

WebhookHandler = Callable[..., Any]


def create_webhook_router(
    handler: WebhookHandler,
    secret: str | bytes | None = None,
    path: str | None = None,
) -> APIRouter:
    """Build a router with one POST route that verifies and dispatches deliveries.

    ``handler(event, payload)`` is called for every accepted delivery and may
    be a coroutine function. ``secret`` defaults to ``TREEZOR_WEBHOOK_SECRET``.
    """
    router = APIRouter(tags=["Treezor"])

    @router.post(path or settings.webhook_path)
    async def receive_treezor_webhook(request: Request) -> dict:
        signing_secret = secret if secret is not None else settings.webhook_secret
        if not signing_secret:
            logger.error("Treezor webhook secret not configured, rejecting delivery")
            raise HTTPException(status_code=500, detail="Webhook secret not configured")

        body = await request.body()
        try:
            event, payload = process_webhook(body, request.headers.get("content-type"), signing_secret)
        except WebhookStructureError as exc:
            logger.warning("Rejected malformed Treezor webhook: %s", exc.message)
            raise HTTPException(status_code=400, detail=exc.message)
        except WebhookSignatureError as exc:
            raise HTTPException(status_code=403, detail=exc.message)
        except WebhookDispatchError as exc:
            logger.error("Treezor webhook payload did not decode: %s", exc.message)
            raise HTTPException(status_code=422, detail=exc.message)

        result = handler(event, payload)
        if inspect.isawaitable(result):
            await result
        return {"ok": True}

    return router

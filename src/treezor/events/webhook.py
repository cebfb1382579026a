"""Inbound webhook deliveries: parse, verify, dispatch.

A delivery goes through three stages, in order:

1. ``WebhookEvent.parse`` checks the content type and extracts the event
   type, ids, signature and the exact bytes of ``object_payload``.
2. ``WebhookEvent.verify`` checks the HMAC signature with the shared secret.
3. ``WebhookEvent.dispatch`` decodes the payload into the shape registered
   for the event type. Unrecognized event types decode into
   ``GenericEventPayload`` instead of failing, so new upstream events do not
   break older integrations.
"""

import json
import logging
import re

from pydantic import BaseModel, ValidationError

from treezor.errors.exceptions import WebhookDispatchError, WebhookSignatureError, WebhookStructureError
from treezor.events.payloads import PAYLOAD_TYPES, GenericEventPayload
from treezor.events.registry import EventKind, kind_of
from treezor.events.signature import decode_signature, verify_signature
from treezor.logging_config import bind_webhook_context, clear_webhook_context
from treezor.types import Identifier

logger = logging.getLogger(__name__)

# kycliveness deliveries arrive as text/plain but carry JSON
SUPPORTED_CONTENT_TYPES = ("application/json", "text/plain")

_WS = re.compile(r"[ \t\n\r]*")
_DECODER = json.JSONDecoder()


def media_type(content_type: str | None) -> str:
    """Media type of a Content-Type header, parameters dropped, lowercased."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def split_members(text: str) -> dict[str, tuple[object, str]]:
    """Parse a JSON object, keeping each member's value and its exact source text.

    Raises ValueError when ``text`` is not a single JSON object.
    """
    idx = _WS.match(text, 0).end()
    if text[idx:idx + 1] != "{":
        raise ValueError("body is not a JSON object")
    idx = _WS.match(text, idx + 1).end()
    members: dict[str, tuple[object, str]] = {}
    if text[idx:idx + 1] == "}":
        idx += 1
    else:
        while True:
            if text[idx:idx + 1] != '"':
                raise ValueError(f"expected a member name at offset {idx}")
            key, idx = _DECODER.raw_decode(text, idx)
            idx = _WS.match(text, idx).end()
            if text[idx:idx + 1] != ":":
                raise ValueError(f"expected ':' at offset {idx}")
            idx = _WS.match(text, idx + 1).end()
            start = idx
            value, idx = _DECODER.raw_decode(text, idx)
            members[key] = (value, text[start:idx])
            idx = _WS.match(text, idx).end()
            sep = text[idx:idx + 1]
            idx += 1
            if sep == "}":
                break
            if sep != ",":
                raise ValueError(f"expected ',' or '}}' at offset {idx - 1}")
            idx = _WS.match(text, idx).end()
    if _WS.match(text, idx).end() != len(text):
        raise ValueError(f"trailing data at offset {idx}")
    return members


def _optional_text(members: dict, key: str) -> str | None:
    value = members.get(key, (None, ""))[0]
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # ids occasionally arrive as numbers
    return Identifier.from_wire(value).to_wire()


class WebhookEvent(BaseModel):
    """One webhook delivery.

    ``object_payload`` holds the payload bytes exactly as received, which is
    what the signature covers.
    """

    webhook_id: str | None = None
    webhook: str | None = None
    object: str | None = None
    object_id: str | None = None
    object_payload: bytes
    object_payload_signature: str

    @classmethod
    def parse(cls, body: bytes | str, content_type: str | None) -> "WebhookEvent":
        """Structural decode of a delivery body. Raises WebhookStructureError."""
        ct = media_type(content_type)
        if ct not in SUPPORTED_CONTENT_TYPES:
            raise WebhookStructureError(
                f"Webhook request has unsupported Content-Type {content_type!r}",
                {"content_type": content_type},
            )

        try:
            text = body.decode("utf-8") if isinstance(body, bytes) else body
            members = split_members(text)
        except (UnicodeDecodeError, ValueError) as exc:
            raise WebhookStructureError("Webhook request has invalid JSON payload") from exc

        payload_value, payload_text = members.get("object_payload", (None, ""))
        if payload_value is None:
            raise WebhookStructureError("Webhook request has missing payload")

        signature = members.get("object_payload_signature", (None, ""))[0]
        if not signature:
            raise WebhookStructureError("Webhook request has missing signature")
        if not isinstance(signature, str):
            raise WebhookStructureError("Webhook request signature is not a string")

        try:
            event = cls(
                webhook_id=_optional_text(members, "webhook_id"),
                webhook=_optional_text(members, "webhook"),
                object=_optional_text(members, "object"),
                object_id=_optional_text(members, "object_id"),
                object_payload=payload_text.encode("utf-8"),
                object_payload_signature=signature,
            )
        except ValueError as exc:
            raise WebhookStructureError(f"Webhook request has malformed fields: {exc}") from exc
        logger.debug("Parsed webhook %s for %s %s", event.webhook, event.object, event.object_id)
        return event

    @property
    def kind(self) -> EventKind:
        return kind_of(self.webhook)

    def is_valid(self, secret: str | bytes) -> bool:
        return verify_signature(self.object_payload, self.object_payload_signature, secret)

    def verify(self, secret: str | bytes) -> "WebhookEvent":
        """Check the payload signature. Raises WebhookSignatureError on failure."""
        try:
            decode_signature(self.object_payload_signature)
        except ValueError as exc:
            raise WebhookSignatureError(
                f"error decoding signature {self.object_payload_signature!r}",
                {"event_type": self.webhook},
            ) from exc
        if not self.is_valid(secret):
            logger.warning("Rejected webhook %s %s: bad signature", self.webhook, self.object_id)
            raise WebhookSignatureError(details={"event_type": self.webhook})
        return self

    def dispatch(self) -> BaseModel:
        """Decode the payload into the shape registered for the event type."""
        payload_type = PAYLOAD_TYPES.get(self.kind)
        if payload_type is None:
            if self.kind is EventKind.UNKNOWN:
                logger.info("Unrecognized webhook event type %r, decoding generically", self.webhook)
            return GenericEventPayload.from_raw(self.object_payload)
        try:
            return payload_type.model_validate_json(self.object_payload)
        except ValidationError as exc:
            raise WebhookDispatchError(
                self.webhook or "",
                f"payload does not decode as {payload_type.__name__}: {exc}",
                exc.errors(include_url=False, include_context=False),
            ) from exc


def process_webhook(
    body: bytes | str,
    content_type: str | None,
    secret: str | bytes,
) -> tuple[WebhookEvent, BaseModel]:
    """Run parse, verify and dispatch on one delivery."""
    event = WebhookEvent.parse(body, content_type)
    tokens = bind_webhook_context(event.webhook or "", event.object_id, event.webhook_id)
    try:
        event.verify(secret)
        payload = event.dispatch()
        logger.info("Accepted webhook %s", event.webhook)
        return event, payload
    finally:
        clear_webhook_context(tokens)

"""Webhook validation and payload dispatch."""

from treezor.events.payloads import PAYLOAD_TYPES, EventPayload, GenericEventPayload
from treezor.events.registry import EVENT_KINDS, EventKind, kind_of
from treezor.events.signature import sign_payload, verify_signature
from treezor.events.webhook import WebhookEvent, process_webhook

__all__ = [
    "EVENT_KINDS",
    "EventKind",
    "EventPayload",
    "GenericEventPayload",
    "PAYLOAD_TYPES",
    "WebhookEvent",
    "kind_of",
    "process_webhook",
    "sign_payload",
    "verify_signature",
]

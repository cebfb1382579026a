"""Treezor banking-as-a-service client core.

Lenient scalar codecs for the upstream's JSON, the response envelope
contract, and webhook signature validation with typed payload dispatch.
"""

from treezor.client import TreezorClient, check_response
from treezor.envelope import Envelope, decode_list, decode_single
from treezor.errors import (
    EnvelopeCountError,
    EnvelopeError,
    ScalarDecodeError,
    TreezorAPIError,
    TreezorError,
    WebhookDispatchError,
    WebhookError,
    WebhookSignatureError,
    WebhookStructureError,
)
from treezor.events import EventKind, GenericEventPayload, WebhookEvent, process_webhook, sign_payload, verify_signature
from treezor.types import (
    Amount,
    Boolean,
    Date,
    Identifier,
    Integer,
    Metadata,
    Percentage,
    Timestamp,
    TimestampLondon,
    TimestampParis,
)

__version__ = "0.1.0"

__all__ = [
    "Amount",
    "Boolean",
    "Date",
    "Envelope",
    "EnvelopeCountError",
    "EnvelopeError",
    "EventKind",
    "GenericEventPayload",
    "Identifier",
    "Integer",
    "Metadata",
    "Percentage",
    "ScalarDecodeError",
    "Timestamp",
    "TimestampLondon",
    "TimestampParis",
    "TreezorAPIError",
    "TreezorClient",
    "TreezorError",
    "WebhookDispatchError",
    "WebhookError",
    "WebhookEvent",
    "WebhookSignatureError",
    "WebhookStructureError",
    "check_response",
    "decode_list",
    "decode_single",
    "process_webhook",
    "sign_payload",
    "verify_signature",
]

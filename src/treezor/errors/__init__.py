"""Exception hierarchy for the Treezor client core."""

from treezor.errors.exceptions import (
    ConfigurationError,
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

__all__ = [
    "ConfigurationError",
    "EnvelopeCountError",
    "EnvelopeError",
    "ScalarDecodeError",
    "TreezorAPIError",
    "TreezorError",
    "WebhookDispatchError",
    "WebhookError",
    "WebhookSignatureError",
    "WebhookStructureError",
]

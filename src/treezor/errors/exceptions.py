"""Custom exception classes for the Treezor client."""


class TreezorError(Exception):
    """Base exception for the Treezor client."""

    def __init__(self, code: str, message: str, details=None):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(TreezorError):
    """Invalid or missing client configuration."""

    def __init__(self, message: str, details=None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class ScalarDecodeError(TreezorError, ValueError):
    """A wire value matched none of the representations accepted by its scalar type.

    Also a ValueError so that pydantic reports it as a field validation error
    when the scalar is used inside a model.
    """

    def __init__(self, type_name: str, payload, reason: str):
        self.type_name = type_name
        self.payload = payload
        self.reason = reason
        super().__init__(
            "SCALAR_DECODE_ERROR",
            f"treezor.{type_name}: cannot decode {payload!r}: {reason}",
            {"type": type_name, "payload": repr(payload)},
        )


class EnvelopeError(TreezorError):
    """Response body does not have the `{"<resource>": [...]}` shape."""

    def __init__(self, resource: str, message: str, details=None):
        self.resource = resource
        super().__init__("ENVELOPE_ERROR", message, details)


class EnvelopeCountError(EnvelopeError):
    """Single-item operation received zero or several items."""

    def __init__(self, resource: str, count: int):
        self.count = count
        super().__init__(
            resource,
            f"API did not return exactly one item under '{resource}': {count} items returned",
            {"resource": resource, "count": count},
        )
        self.code = "ENVELOPE_COUNT_MISMATCH"


class WebhookError(TreezorError):
    """Base class for inbound webhook failures."""


class WebhookStructureError(WebhookError):
    """Delivery is unusable before any signature check: bad content type, bad JSON, missing fields."""

    def __init__(self, message: str, details=None):
        super().__init__("WEBHOOK_STRUCTURE_ERROR", message, details)


class WebhookSignatureError(WebhookError):
    """Payload signature check failed. The delivery must be rejected."""

    def __init__(self, message: str = "payload signature check failed", details=None):
        super().__init__("WEBHOOK_SIGNATURE_ERROR", message, details)


class WebhookDispatchError(WebhookError):
    """Payload of a known event type does not decode into its declared shape."""

    def __init__(self, event_type: str, message: str, details=None):
        self.event_type = event_type
        super().__init__("WEBHOOK_DISPATCH_ERROR", f"{event_type}: {message}", details)


class TreezorAPIError(TreezorError):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, status_code: int, method: str, url: str, errors=None, body: str = ""):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.errors = errors or []
        self.body = body
        summary = "; ".join(str(e) for e in self.errors) or body or "no error body"
        super().__init__(
            "API_ERROR",
            f"{method} {url}: {status_code} {summary}",
            {"status_code": status_code, "errors": [getattr(e, "model_dump", lambda: e)() for e in self.errors]},
        )

    @property
    def codes(self) -> list[int]:
        """Numeric upstream error codes carried by the response, in order."""
        return [e.error_code for e in self.errors if getattr(e, "error_code", None) is not None]

"""Common machinery shared by the lenient scalar codecs.

Every scalar decodes from an already-parsed JSON value (``from_wire``) and
encodes back to the JSON value the upstream expects (``to_wire``). The raw
byte forms ``decode``/``encode`` wrap these with ``json``. Scalars plug into
pydantic so resource models can use them as field annotations.
"""

import json
import re
from typing import Any, ClassVar

from pydantic_core import core_schema

from treezor.errors.exceptions import ScalarDecodeError

# JSON number grammar (RFC 8259), applied to numbers sent as strings.
JSON_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")
JSON_INTEGER = re.compile(r"-?(?:0|[1-9]\d*)")


class WireScalar:
    """Mixin for scalar types with a lenient wire representation."""

    type_name: ClassVar[str] = "Scalar"
    json_schema: ClassVar[dict[str, Any]] = {}

    @classmethod
    def from_wire(cls, value: Any):
        raise NotImplementedError

    def to_wire(self) -> Any:
        raise NotImplementedError

    @classmethod
    def decode(cls, raw: bytes | str):
        """Decode raw JSON bytes into a normalized value."""
        try:
            value = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ScalarDecodeError(cls.type_name, raw, f"not a JSON value ({exc})") from exc
        return cls.from_wire(value)

    def encode(self) -> bytes:
        """Encode into the raw JSON bytes the upstream expects."""
        return json.dumps(self.to_wire(), ensure_ascii=False).encode("utf-8")

    @classmethod
    def fail(cls, payload: Any, reason: str) -> ScalarDecodeError:
        return ScalarDecodeError(cls.type_name, payload, reason)

    @classmethod
    def _validate(cls, value: Any):
        if isinstance(value, cls):
            return value
        return cls.from_wire(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.to_wire(),
                when_used="json",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        return dict(cls.json_schema)

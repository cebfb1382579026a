"""Free-form string mapping attached to some resources."""

from typing import Any

from treezor.types.base import WireScalar


class Metadata(WireScalar, dict):
    """``{}`` and ``[]`` both mean "no metadata"; otherwise an object of strings."""

    type_name = "Metadata"
    json_schema = {"type": "object", "additionalProperties": {"type": "string"}}

    @classmethod
    def from_wire(cls, value: Any) -> "Metadata":
        if value == [] or value is None:
            return cls()
        if not isinstance(value, dict):
            raise cls.fail(value, f"unexpected JSON {type(value).__name__}")
        for key, item in value.items():
            if not isinstance(item, str):
                raise cls.fail(value, f"value for {key!r} is not a string")
        return cls(value)

    def to_wire(self) -> dict[str, str]:
        return dict(self)

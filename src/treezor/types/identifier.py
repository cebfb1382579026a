"""Opaque resource key, normalized to its textual form."""

from typing import Any

from treezor.types.base import WireScalar


class Identifier(WireScalar, str):
    """Resource identifier sent as a JSON number or a string.

    Always kept and re-emitted as a string so large numeric ids never lose
    precision. The empty string is a valid (empty) identifier.
    """

    type_name = "Identifier"
    json_schema = {"type": "string"}

    @classmethod
    def from_wire(cls, value: Any) -> "Identifier":
        if isinstance(value, bool):
            raise cls.fail(value, "booleans are not identifiers")
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, int):
            return cls(str(value))
        if isinstance(value, float):
            if not value.is_integer():
                raise cls.fail(value, "fractional identifier")
            return cls(str(int(value)))
        raise cls.fail(value, f"unexpected JSON {type(value).__name__}")

    def to_wire(self) -> str:
        return str.__str__(self)

    def __repr__(self) -> str:
        return f"Identifier({str.__repr__(self)})"

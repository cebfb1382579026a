"""Numeric boolean: accepts true/false, 0/1 and numeric strings, always emits 0 or 1."""

from typing import Any

from treezor.types.base import JSON_INTEGER, WireScalar


class Boolean(WireScalar, int):
    type_name = "Boolean"
    json_schema = {"type": "integer", "enum": [0, 1]}

    def __new__(cls, value: Any = False):
        return super().__new__(cls, 1 if value else 0)

    @classmethod
    def from_wire(cls, value: Any) -> "Boolean":
        if isinstance(value, bool):
            return cls(value)
        if isinstance(value, int):
            return cls(value != 0)
        if isinstance(value, str):
            # "" is not accepted: the upstream never sends it for flags
            if not JSON_INTEGER.fullmatch(value):
                raise cls.fail(value, "not an integer flag")
            return cls(int(value) != 0)
        raise cls.fail(value, f"unexpected JSON {type(value).__name__}")

    def to_wire(self) -> int:
        return int(self)

    def __repr__(self) -> str:
        return f"Boolean({bool(self)})"

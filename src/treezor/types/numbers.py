"""Numeric scalars: Amount, Percentage and Integer."""

import math
from decimal import Decimal
from typing import Any

from treezor.types.base import JSON_INTEGER, JSON_NUMBER, WireScalar


def _decimal_text(value: float) -> str:
    # repr() is the shortest round-tripping form; Decimal drops exponent notation.
    return format(Decimal(repr(value)), "f")


class _Decimal(WireScalar, float):
    """Float that arrives as a JSON number or numeric string and leaves as a string."""

    json_schema = {"type": "string", "pattern": JSON_NUMBER.pattern}

    @classmethod
    def from_wire(cls, value: Any):
        if isinstance(value, bool):
            raise cls.fail(value, "booleans are not numbers")
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            if value == "":
                return cls(0.0)
            if not JSON_NUMBER.fullmatch(value):
                raise cls.fail(value, "not a numeric literal")
            number = float(value)
        else:
            raise cls.fail(value, f"unexpected JSON {type(value).__name__}")
        if not math.isfinite(number):
            raise cls.fail(value, "not a finite number")
        return cls(number)

    def to_wire(self) -> str:
        return _decimal_text(float(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


class Amount(_Decimal):
    """Monetary value. Sent upstream as a decimal string, e.g. ``"12.5"``."""

    type_name = "Amount"


class Percentage(_Decimal):
    """Ratio with the same lenient parsing as Amount."""

    type_name = "Percentage"


class Integer(WireScalar, int):
    """Whole number sent as a JSON number, a numeric string, or ``""`` (zero)."""

    type_name = "Integer"
    json_schema = {"type": "integer"}

    @classmethod
    def from_wire(cls, value: Any) -> "Integer":
        if isinstance(value, bool):
            raise cls.fail(value, "booleans are not integers")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, float):
            raise cls.fail(value, "not a whole number")
        if isinstance(value, str):
            if value == "":
                return cls(0)
            if not JSON_INTEGER.fullmatch(value):
                raise cls.fail(value, "not an integer literal")
            return cls(int(value))
        raise cls.fail(value, f"unexpected JSON {type(value).__name__}")

    def to_wire(self) -> int:
        return int(self)

    def __repr__(self) -> str:
        return f"Integer({int(self)})"

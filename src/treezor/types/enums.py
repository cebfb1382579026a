"""Integer and string enums the upstream sends leniently."""

from enum import IntEnum, StrEnum
from typing import Any

from pydantic_core import core_schema

from treezor.errors.exceptions import ScalarDecodeError
from treezor.types.base import JSON_INTEGER


class WireIntEnum(IntEnum):
    """IntEnum decoded leniently from ``2`` or ``"2"``.

    Values outside the declared members are kept as pseudo-members named
    after the number, so new upstream codes do not break decoding.
    """

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        member = int.__new__(cls, value)
        member._name_ = str(value)
        member._value_ = value
        return member

    @classmethod
    def from_wire(cls, value: Any):
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ScalarDecodeError(cls.__name__, value, "booleans are not enum codes")
        if isinstance(value, str) and JSON_INTEGER.fullmatch(value):
            value = int(value)
        if not isinstance(value, int):
            raise ScalarDecodeError(cls.__name__, value, "not an integer code")
        return cls(value)

    def to_wire(self) -> int:
        return int(self)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_wire,
            serialization=core_schema.plain_serializer_function_ser_schema(int, when_used="json"),
        )


class WireStrEnum(StrEnum):
    """StrEnum that keeps unlisted upstream values as pseudo-members.

    ``""`` decodes as None: the upstream sends it where the field does not
    apply, e.g. ``parentType`` on a user with no parent.
    """

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str) or not value:
            return None
        member = str.__new__(cls, value)
        member._name_ = value.upper()
        member._value_ = value
        return member

    @classmethod
    def from_wire(cls, value: Any):
        if isinstance(value, cls) or value is None:
            return value
        if not isinstance(value, str):
            raise ScalarDecodeError(cls.__name__, value, "not a string code")
        if value == "":
            return None
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_wire,
            serialization=core_schema.plain_serializer_function_ser_schema(str, when_used="json"),
        )


class UserType(WireIntEnum):
    NATURAL_PERSON = 1
    BUSINESS = 2
    NON_GOVERNMENTAL_ORGANIZATION = 3
    GOVERNMENTAL_ORGANIZATION = 4


class ControllingPersonType(WireIntEnum):
    SHAREHOLDER = 1
    LEGAL_REPRESENTATIVE = 3


class EmployeeType(WireIntEnum):
    NONE = 0
    LEADER = 1
    EMPLOYEE = 2


class KYCLevel(WireIntEnum):
    NONE = 0
    PENDING = 1
    REGULAR = 2
    STRONG = 3
    REFUSED = 4
    INVESTIGATING = 5

    def __str__(self) -> str:
        if self._name_ not in type(self).__members__:
            return self._name_
        return f"LEVEL_{self._name_}"


class KYCReview(WireIntEnum):
    NONE = 0
    PENDING = 1
    VALIDATED = 2
    REFUSED = 3

    def __str__(self) -> str:
        if self._name_ not in type(self).__members__:
            return self._name_
        return f"REVIEW_{self._name_}"


class WalletType(WireIntEnum):
    ELECTRONIC_MONEY = 9
    PAYMENT_ACCOUNT = 10
    MIRROR = 13
    ELECTRONIC_MONEY_CARD = 14


class TransferType(WireIntEnum):
    WALLET_TO_WALLET = 1
    CLIENT_FEES = 3
    CREDIT_NOTE = 4


class PayoutType(WireIntEnum):
    CREDIT_TRANSFER = 1
    DIRECT_DEBIT = 2


class DocumentType(WireIntEnum):
    POLICE_RECORD = 2
    COMPANY_REGISTRATION = 4
    CV = 6
    SWORN_STATEMENT = 7
    TURNOVER = 8
    IDENTITY_CARD = 9
    BANK_IDENTITY_STATEMENT = 11
    PROOF_OF_ADDRESS = 12
    MOBILE_PHONE_INVOICE = 13
    INVOICE = 14
    RESIDENCE_PERMIT = 15
    DRIVING_LICENSE = 16
    PASSPORT = 17
    EMPLOYEE_PROXY = 18
    OFFICIAL_COMPANY_REGISTRATION = 19
    TAX_CERTIFICATE = 20
    EMPLOYEE_PAYMENT_NOTICE = 21
    USER_BANK_STATEMENT = 22
    BUSINESS_LEGAL_STATUS = 23
    TAX_STATEMENT = 24
    EXEMPTION_STATEMENT = 25
    LIVENESS_RESULT = 26
    HEALTH_INSURANCE_CARD = 27

"""Lenient scalar codecs for the upstream's inconsistently typed JSON."""

from treezor.types.base import WireScalar
from treezor.types.boolean import Boolean
from treezor.types.dates import DATE_SENTINEL, Date
from treezor.types.enums import (
    ControllingPersonType,
    DocumentType,
    EmployeeType,
    KYCLevel,
    KYCReview,
    PayoutType,
    TransferType,
    UserType,
    WalletType,
    WireIntEnum,
    WireStrEnum,
)
from treezor.types.identifier import Identifier
from treezor.types.metadata import Metadata
from treezor.types.numbers import Amount, Integer, Percentage
from treezor.types.timestamps import (
    TIMESTAMP_SENTINEL,
    Timestamp,
    TimestampLondon,
    TimestampParis,
    bind_zone,
    format_timestamp,
    parse_timestamp,
)
from treezor.types.zones import LONDON, PARIS, UTC, get_zone

__all__ = [
    "Amount",
    "Boolean",
    "ControllingPersonType",
    "DATE_SENTINEL",
    "Date",
    "DocumentType",
    "EmployeeType",
    "Identifier",
    "Integer",
    "KYCLevel",
    "KYCReview",
    "LONDON",
    "Metadata",
    "PARIS",
    "Percentage",
    "PayoutType",
    "TIMESTAMP_SENTINEL",
    "Timestamp",
    "TimestampLondon",
    "TimestampParis",
    "TransferType",
    "UTC",
    "UserType",
    "WalletType",
    "WireIntEnum",
    "WireStrEnum",
    "WireScalar",
    "bind_zone",
    "format_timestamp",
    "get_zone",
    "parse_timestamp",
]

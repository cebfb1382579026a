"""Upstream resource shapes built on the lenient scalar types."""

from treezor.models.base import SnakeCaseModel, TreezorModel
from treezor.models.cards import (
    Card,
    CardDigitalization,
    CardRestrictionGroupLimits,
    CardTransaction,
    Chargeback,
    RestrictionGroup,
)
from treezor.models.common import APIErrorDetail, ErrorCode, ErrorResponse
from treezor.models.kyc import KYCLiveness, KYCLivenessIdentity
from treezor.models.payments import Payin, PayinRefund, Payout, PayoutRefund, Transaction
from treezor.models.transfers import (
    BankAccount,
    Beneficiary,
    Mandate,
    RecallR,
    SepaSctr,
    SepaSddr,
    Transfer,
    TransferRefund,
)
from treezor.models.users import DocumentStatus, Document, ParentType, User
from treezor.models.wallets import Balance, Wallet

__all__ = [
    "APIErrorDetail",
    "Balance",
    "BankAccount",
    "Beneficiary",
    "Card",
    "CardDigitalization",
    "CardRestrictionGroupLimits",
    "CardTransaction",
    "Chargeback",
    "Document",
    "DocumentStatus",
    "ErrorCode",
    "ErrorResponse",
    "KYCLiveness",
    "KYCLivenessIdentity",
    "Mandate",
    "ParentType",
    "Payin",
    "PayinRefund",
    "Payout",
    "PayoutRefund",
    "RecallR",
    "RestrictionGroup",
    "SepaSctr",
    "SepaSddr",
    "SnakeCaseModel",
    "Transaction",
    "Transfer",
    "TransferRefund",
    "TreezorModel",
    "User",
    "Wallet",
]

"""Static table of webhook event types.

Supporting a new event type means adding one line to ``EVENT_KINDS`` (and,
for a new payload family, one entry to ``PAYLOAD_TYPES``).
"""

from enum import StrEnum


class EventKind(StrEnum):
    """Payload family an event type decodes into."""

    BALANCE = "balance"
    BANK_ACCOUNT = "bankaccount"
    BENEFICIARY = "beneficiary"
    CARD = "card"
    CARD_CHARGEBACK = "card.chargeback"
    CARD_DIGITALIZATION = "cardDigitalization"
    CARD_TRANSACTION = "cardtransaction"
    COUNTRY_GROUP = "countryGroup"
    DOCUMENT = "document"
    KYC_LIVENESS = "kycliveness"
    MANDATE = "mandate"
    MCC_GROUP = "mccGroup"
    MERCHANT_ID_GROUP = "merchantIdGroup"
    ONE_CLICK_CARD = "oneclickcard"
    PAYIN = "payin"
    PAYIN_REFUND = "payinrefund"
    PAYOUT = "payout"
    PAYOUT_REFUND = "payoutRefund"
    RECALLR = "recallR"
    SEPA_SCTR = "sepa.sctr"
    SEPA_SDDE = "sepa.sdde"
    SEPA_SDDR = "sepa.sddr"
    TRANSACTION = "transaction"
    TRANSFER = "transfer"
    TRANSFER_REFUND = "transferrefund"
    USER = "user"
    WALLET = "wallet"
    UNKNOWN = "unknown"


def _family(kind: EventKind, prefix: str, *actions: str) -> dict[str, EventKind]:
    return {f"{prefix}.{action}": kind for action in actions}


EVENT_KINDS: dict[str, EventKind] = {
    **_family(EventKind.BALANCE, "balance", "update"),
    **_family(EventKind.BENEFICIARY, "beneficiary", "create", "update"),
    **_family(EventKind.BANK_ACCOUNT, "bankaccount", "create", "update", "cancel"),
    **_family(
        EventKind.CARD,
        "card",
        "requestphysical",
        "createvirtual",
        "convertvirtual",
        "changepin",
        "activate",
        "renew",
        "regenerate",
        "update",
        "limits",
        "options",
        "setpin",
        "unblockpin",
        "lockunlock",
        "register3DS",
    ),
    **_family(
        EventKind.CARD_DIGITALIZATION,
        "cardDigitalization",
        "create",
        "update",
        "activation",
        "deactivation",
        "complete",
    ),
    **_family(EventKind.CARD_TRANSACTION, "cardtransaction", "create"),
    **_family(EventKind.CARD_CHARGEBACK, "card.acquiring.chargeback", "create"),
    **_family(EventKind.COUNTRY_GROUP, "countryGroup", "create", "update", "cancel"),
    **_family(EventKind.DOCUMENT, "document", "create", "update", "cancel"),
    **_family(EventKind.KYC_LIVENESS, "kycliveness", "create", "update"),
    **_family(EventKind.MANDATE, "mandate", "create", "sign", "cancel"),
    **_family(EventKind.MCC_GROUP, "mccGroup", "create", "update", "cancel"),
    **_family(EventKind.MERCHANT_ID_GROUP, "merchantIdGroup", "create", "update", "cancel"),
    **_family(EventKind.ONE_CLICK_CARD, "oneclickcard", "create", "update", "cancel"),
    **_family(EventKind.PAYIN, "payin", "create", "update", "cancel"),
    **_family(EventKind.PAYIN_REFUND, "payinrefund", "create", "update", "cancel"),
    **_family(EventKind.PAYOUT, "payout", "create", "update", "cancel"),
    **_family(EventKind.PAYOUT_REFUND, "payoutRefund", "create", "update", "cancel"),
    **_family(EventKind.RECALLR, "recallR", "need_response"),
    **_family(EventKind.SEPA_SCTR, "sepa", "return_sctr"),
    **_family(EventKind.SEPA_SDDR, "sepa", "return_sddr", "reject_sddr_core", "reject_sddr_b2b"),
    **_family(EventKind.SEPA_SDDE, "sepa", "reject_sdde"),
    **_family(EventKind.TRANSACTION, "transaction", "create"),
    **_family(EventKind.TRANSFER, "transfer", "create", "update", "cancel"),
    **_family(EventKind.TRANSFER_REFUND, "transferrefund", "create", "update", "cancel"),
    **_family(EventKind.USER, "user", "create", "update", "cancel", "kycrequest", "kycreview"),
    **_family(EventKind.WALLET, "wallet", "create", "update", "cancel"),
}


def kind_of(event_type: str | None) -> EventKind:
    """Look up an event type; unrecognized or missing types map to UNKNOWN."""
    if not event_type:
        return EventKind.UNKNOWN
    return EVENT_KINDS.get(event_type, EventKind.UNKNOWN)

"""Payload shapes for each event family.

Most families wrap their items in the same ``{"<resource>": [...]}``
envelope as API responses; each exposes a singular accessor for the first
item. Card digitalization and KYC liveness payloads are flat objects.
"""

import json
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from treezor.events.registry import EventKind
from treezor.models import (
    Balance,
    BankAccount,
    Beneficiary,
    Card,
    CardDigitalization,
    CardTransaction,
    Chargeback,
    Document,
    KYCLiveness,
    Mandate,
    Payin,
    PayinRefund,
    Payout,
    PayoutRefund,
    RecallR,
    RestrictionGroup,
    SepaSctr,
    SepaSddr,
    Transaction,
    Transfer,
    TransferRefund,
    User,
    Wallet,
)


class EventPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def _first(items):
    return items[0] if items else None


class BalanceEvent(EventPayload):
    balances: list[Balance] | None = None

    @property
    def balance(self) -> Balance | None:
        return _first(self.balances)


class BankAccountEvent(EventPayload):
    bankaccounts: list[BankAccount] | None = None

    @property
    def bankaccount(self) -> BankAccount | None:
        return _first(self.bankaccounts)


class BeneficiaryEvent(EventPayload):
    beneficiaries: list[Beneficiary] | None = None

    @property
    def beneficiary(self) -> Beneficiary | None:
        return _first(self.beneficiaries)


class CardEvent(EventPayload):
    cards: list[Card] | None = None

    @property
    def card(self) -> Card | None:
        return _first(self.cards)


class CardDigitalizationEvent(CardDigitalization):
    pass


class CardTransactionEvent(EventPayload):
    cardtransactions: list[CardTransaction] | None = None

    @property
    def cardtransaction(self) -> CardTransaction | None:
        return _first(self.cardtransactions)


class CardChargebackEvent(EventPayload):
    chargebacks: list[Chargeback] | None = None

    @property
    def chargeback(self) -> Chargeback | None:
        return _first(self.chargebacks)


class CountryRestrictionGroupEvent(EventPayload):
    country_restriction_groups: list[RestrictionGroup] | None = Field(None, alias="countryRestrictionGroups")

    @property
    def country_restriction_group(self) -> RestrictionGroup | None:
        return _first(self.country_restriction_groups)


class DocumentEvent(EventPayload):
    documents: list[Document] | None = None

    @property
    def document(self) -> Document | None:
        return _first(self.documents)


class KYCLivenessEvent(KYCLiveness):
    pass


class MandateEvent(EventPayload):
    mandates: list[Mandate] | None = None

    @property
    def mandate(self) -> Mandate | None:
        return _first(self.mandates)


class MCCRestrictionGroupEvent(EventPayload):
    mcc_restriction_groups: list[RestrictionGroup] | None = Field(None, alias="mccIdRestrictionGroups")

    @property
    def mcc_restriction_group(self) -> RestrictionGroup | None:
        return _first(self.mcc_restriction_groups)


class MIDRestrictionGroupEvent(EventPayload):
    mid_restriction_groups: list[RestrictionGroup] | None = Field(None, alias="merchantIdRestrictionGroups")

    @property
    def mid_restriction_group(self) -> RestrictionGroup | None:
        return _first(self.mid_restriction_groups)


class PayinEvent(EventPayload):
    payins: list[Payin] | None = None

    @property
    def payin(self) -> Payin | None:
        return _first(self.payins)


class PayinRefundEvent(EventPayload):
    payinrefunds: list[PayinRefund] | None = None

    @property
    def payinrefund(self) -> PayinRefund | None:
        return _first(self.payinrefunds)


class PayoutEvent(EventPayload):
    payouts: list[Payout] | None = None

    @property
    def payout(self) -> Payout | None:
        return _first(self.payouts)


class PayoutRefundEvent(EventPayload):
    payout_refunds: list[PayoutRefund] | None = Field(None, alias="payoutRefunds")

    @property
    def payout_refund(self) -> PayoutRefund | None:
        return _first(self.payout_refunds)


class RecallREvent(EventPayload):
    recallrs: list[RecallR] | None = None

    @property
    def recallr(self) -> RecallR | None:
        return _first(self.recallrs)


class SepaSctrEvent(EventPayload):
    sepa_sctrs: list[SepaSctr] | None = Field(
        None, validation_alias=AliasChoices("SepaSctrs", "sepaSctrs", "sepasctrs")
    )

    @property
    def sepa_sctr(self) -> SepaSctr | None:
        return _first(self.sepa_sctrs)


class SepaSddrEvent(EventPayload):
    sepa_sddrs: list[SepaSddr] | None = Field(
        None, validation_alias=AliasChoices("SepaSddrs", "sepaSddrs", "sepasddrs")
    )

    @property
    def sepa_sddr(self) -> SepaSddr | None:
        return _first(self.sepa_sddrs)


class TransactionEvent(EventPayload):
    transactions: list[Transaction] | None = None

    @property
    def transaction(self) -> Transaction | None:
        return _first(self.transactions)


class TransferEvent(EventPayload):
    transfers: list[Transfer] | None = None

    @property
    def transfer(self) -> Transfer | None:
        return _first(self.transfers)


class TransferRefundEvent(EventPayload):
    transferrefunds: list[TransferRefund] | None = None

    @property
    def transferrefund(self) -> TransferRefund | None:
        return _first(self.transferrefunds)


class UserEvent(EventPayload):
    users: list[User] | None = None

    @property
    def user(self) -> User | None:
        return _first(self.users)


class WalletEvent(EventPayload):
    wallets: list[Wallet] | None = None

    @property
    def wallet(self) -> Wallet | None:
        return _first(self.wallets)


class GenericEventPayload(BaseModel):
    """Untyped payload for event types without a declared shape.

    ``data`` is the parsed JSON, or None when the bytes are not JSON.
    """

    data: Any = None

    @classmethod
    def from_raw(cls, raw: bytes | None) -> "GenericEventPayload":
        if not raw:
            return cls()
        try:
            return cls(data=json.loads(raw))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return cls()


# Families absent from this table (one-click card, SDDE, unknown) decode
# into GenericEventPayload.
PAYLOAD_TYPES: dict[EventKind, type[BaseModel]] = {
    EventKind.BALANCE: BalanceEvent,
    EventKind.BANK_ACCOUNT: BankAccountEvent,
    EventKind.BENEFICIARY: BeneficiaryEvent,
    EventKind.CARD: CardEvent,
    EventKind.CARD_CHARGEBACK: CardChargebackEvent,
    EventKind.CARD_DIGITALIZATION: CardDigitalizationEvent,
    EventKind.CARD_TRANSACTION: CardTransactionEvent,
    EventKind.COUNTRY_GROUP: CountryRestrictionGroupEvent,
    EventKind.DOCUMENT: DocumentEvent,
    EventKind.KYC_LIVENESS: KYCLivenessEvent,
    EventKind.MANDATE: MandateEvent,
    EventKind.MCC_GROUP: MCCRestrictionGroupEvent,
    EventKind.MERCHANT_ID_GROUP: MIDRestrictionGroupEvent,
    EventKind.PAYIN: PayinEvent,
    EventKind.PAYIN_REFUND: PayinRefundEvent,
    EventKind.PAYOUT: PayoutEvent,
    EventKind.PAYOUT_REFUND: PayoutRefundEvent,
    EventKind.RECALLR: RecallREvent,
    EventKind.SEPA_SCTR: SepaSctrEvent,
    EventKind.SEPA_SDDR: SepaSddrEvent,
    EventKind.TRANSACTION: TransactionEvent,
    EventKind.TRANSFER: TransferEvent,
    EventKind.TRANSFER_REFUND: TransferRefundEvent,
    EventKind.USER: UserEvent,
    EventKind.WALLET: WalletEvent,
}

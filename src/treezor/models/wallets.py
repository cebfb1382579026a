"""Wallet and balance resources."""

from treezor.models.base import TreezorModel
from treezor.types import Amount, Boolean, Date, Identifier, Integer, TimestampParis, WalletType


class Wallet(TreezorModel):
    wallet_id: Identifier | None = None
    wallet_type_id: WalletType | None = None
    wallet_status: str | None = None
    wallet_tag: str | None = None
    user_id: Identifier | None = None
    user_firstname: str | None = None
    user_lastname: str | None = None
    joint_user_id: Identifier | None = None
    tariff_id: Identifier | None = None
    event_name: str | None = None
    event_alias: str | None = None
    event_message: str | None = None
    event_date: Date | None = None
    event_payin_end_date: Date | None = None
    event_payin_start_date: Date | None = None
    contract_signed: Boolean | None = None
    bic: str | None = None
    iban: str | None = None
    url_image: str | None = None
    currency: str | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    payin_count: Integer | None = None
    payout_count: Integer | None = None
    transfer_count: Integer | None = None
    solde: Amount | None = None
    authorized_balance: Amount | None = None
    total_rows: Integer | None = None
    code_status: Identifier | None = None
    information_status: str | None = None


class Balance(TreezorModel):
    """Balance snapshot of one wallet."""

    wallet_id: Identifier | None = None
    current_balance: Amount | None = None
    authorizations: Amount | None = None
    authorized_balance: Amount | None = None
    currency: str | None = None
    calculation_date: TimestampParis | None = None

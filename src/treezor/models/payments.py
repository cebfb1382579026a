"""Money movements in and out of the platform: payins, payouts, refunds, ledger transactions."""

from typing import Any

from pydantic import Field

from treezor.models.base import TreezorModel
from treezor.types import Amount, Date, Identifier, Integer, PayoutType, TimestampParis


class Payin(TreezorModel):
    payin_id: Identifier | None = None
    payin_tag: str | None = None
    payin_status: str | None = None
    wallet_id: Identifier | None = None
    user_id: Identifier | None = None
    cart_id: Identifier | None = None
    wallet_event_name: str | None = None
    wallet_alias: str | None = None
    user_firstname: str | None = None
    user_lastname: str | None = None
    message_to_user: str | None = None
    payment_method_id: Identifier | None = None
    subtotal_items: Amount | None = None
    subtotal_services: Amount | None = None
    subtotal_tax: Amount | None = None
    amount: Amount | None = None
    currency: str | None = None
    distributor_fee: Amount | None = None
    created_date: TimestampParis | None = None
    created_ip: str | None = None
    payment_html: str | None = None
    payment_language: str | None = None
    payment_post_url: str | None = None
    payment_post_data_url: str | None = None
    payment_accepted_url: str | None = None
    payment_waiting_url: str | None = None
    payment_refused_url: str | None = None
    payment_canceled_url: str | None = None
    payment_exception_url: str | None = None
    iban_fullname: str | None = None
    iban_id: str | None = None
    iban_bic: str | None = None
    iban_tx_end_to_end_id: str | None = None
    iban_tx_id: str | None = None
    refund_amount: Amount | None = None
    dbtr_iban: str | None = Field(None, alias="DbtrIBAN")
    forward_url: str | None = None
    payin_date: Date | None = None
    mandate_id: Identifier | None = None
    creditor_name: str | None = None
    creditor_address_line: str | None = None
    creditor_country: str | None = None
    creditor_iban: str | None = None
    creditor_bic: str | None = Field(None, alias="creditorBIC")
    virtual_iban_id: Identifier | None = None
    virtual_iban_reference: str | None = None
    # card or cheque details, shape depends on the payment method
    additional_data: dict[str, Any] | None = None
    total_rows: Integer | None = None
    code_status: Identifier | None = None
    information_status: str | None = None


class PayinRefund(TreezorModel):
    payinrefund_id: Identifier | None = None
    payinrefund_tag: str | None = None
    payinrefund_status: str | None = None
    wallet_id: Identifier | None = None
    payin_id: Identifier | None = None
    payinrefund_date: Date | None = None
    amount: Amount | None = None
    currency: str | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    reason_tms: str | None = None
    total_rows: Integer | None = None
    code_status: Identifier | None = None
    information_status: str | None = None


class Payout(TreezorModel):
    payout_id: Identifier | None = None
    payout_tag: str | None = None
    payout_status: str | None = None
    payout_type_id: PayoutType | None = None
    payout_type: str | None = None
    wallet_id: Identifier | None = None
    payout_date: Date | None = None
    wallet_event_name: str | None = None
    wallet_alias: str | None = None
    user_firstname: str | None = None
    user_lastname: str | None = None
    user_id: Identifier | None = None
    bankaccount_id: Identifier | None = None
    beneficiary_id: Identifier | None = None
    unique_mandate_reference: str | None = None
    bankaccount_iban: str | None = Field(None, alias="bankaccountIBAN")
    label: str | None = None
    amount: Amount | None = None
    currency: str | None = None
    partner_fee: Amount | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    total_rows: Integer | None = None
    code_status: Identifier | None = None
    information_status: str | None = None


class PayoutRefund(TreezorModel):
    id: Identifier | None = None
    tag: str | None = None
    payout_id: Identifier | None = None
    request_amount: Amount | None = None
    request_currency: str | None = None
    request_comment: str | None = None
    reason_code: str | None = None
    refund_amount: Amount | None = None
    refund_currency: str | None = None
    refund_date: TimestampParis | None = None
    refund_comment: str | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    code_status: Identifier | None = None
    information_status: str | None = None


class Transaction(TreezorModel):
    """Ledger entry between two wallets."""

    transaction_id: Identifier | None = None
    wallet_debit_id: Identifier | None = None
    wallet_credit_id: Identifier | None = None
    transaction_type: str | None = None
    foreign_id: Identifier | None = None
    name: str | None = None
    description: str | None = None
    value_date: Date | None = None
    execution_date: Date | None = None
    amount: Amount | None = None
    wallet_debit_balance: Amount | None = None
    wallet_credit_balance: Amount | None = None
    currency: str | None = None
    created_date: TimestampParis | None = None
    total_rows: Integer | None = None

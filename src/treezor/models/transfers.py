"""Transfers, beneficiaries, bank accounts, SEPA mandates and SEPA returns."""

from typing import Any

from pydantic import Field

from treezor.models.base import SnakeCaseModel, TreezorModel
from treezor.types import (
    Amount,
    Boolean,
    Date,
    Identifier,
    Integer,
    TimestampParis,
    TransferType,
)


class Transfer(TreezorModel):
    """Wallet to wallet transfer."""

    transfer_id: Identifier | None = None
    transfer_type_id: TransferType | None = None
    transfer_tag: str | None = None
    transfer_status: str | None = None
    wallet_id: Identifier | None = None
    foreign_id: Identifier | None = None
    wallet_type_id: Identifier | None = None
    beneficiary_wallet_id: Identifier | None = None
    beneficiary_wallet_type_id: Identifier | None = None
    transfer_date: Date | None = None
    amount: Amount | None = None
    currency: str | None = None
    label: str | None = None
    partner_fee: Amount | None = None
    wallet_event_name: str | None = None
    wallet_alias: str | None = None
    beneficiary_wallet_event_name: str | None = None
    beneficiary_wallet_alias: str | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    total_rows: Integer | None = None
    code_status: Identifier | None = None
    information_status: str | None = None


class TransferRefund(TreezorModel):
    transferrefund_id: Identifier | None = None
    transferrefund_tag: str | None = None
    transferrefund_status: str | None = None
    wallet_id: Identifier | None = None
    transfer_id: Identifier | None = None
    transferrefund_date: TimestampParis | None = None
    amount: Amount | None = None
    currency: str | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    total_rows: Integer | None = None
    code_status: Identifier | None = None
    information_status: str | None = None


class Beneficiary(TreezorModel):
    """External account a user can send SEPA transfers to."""

    id: Identifier | None = None
    tag: str | None = None
    user_id: Identifier | None = None
    nick_name: str | None = None
    name: str | None = None
    address: str | None = None
    iban: str | None = None
    bic: str | None = None
    sepa_creditor_identifier: str | None = None
    sdd_b2b_whitelist: list[dict[str, Any]] | None = None
    sdd_core_blacklist: list[str] | None = None
    usable_for_sct: Boolean | None = None
    sdd_core_known_unique_mandate_reference: list[str] | None = None
    is_active: Boolean | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None


class BankAccount(TreezorModel):
    bankaccount_id: Identifier | None = None
    bankaccount_tag: str | None = None
    bankaccount_status: str | None = None
    user_id: Identifier | None = None
    name: str | None = None
    bankaccount_owner_name: str | None = None
    bankaccount_owner_address: str | None = None
    bankaccount_iban: str | None = Field(None, alias="bankaccountIBAN")
    bankaccount_bic: str | None = Field(None, alias="bankaccountBIC")
    bankaccount_type: str | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    total_rows: Integer | None = None
    code_status: Identifier | None = None
    information_status: str | None = None


class Mandate(TreezorModel):
    """SEPA direct debit mandate."""

    mandate_id: Identifier | None = None
    title: str | None = None
    legal_informations: str | None = None
    unique_mandate_reference: str | None = None
    mandate_status: str | None = None
    user_id: Identifier | None = None
    debtor_name: str | None = None
    debtor_address: str | None = None
    debtor_city: str | None = None
    debtor_zip_code: str | None = None
    debtor_country: str | None = None
    debtor_iban: str | None = None
    debtor_bic: str | None = None
    sequence_type: str | None = None
    creditor_name: str | None = None
    sepa_creditor_identifier: str | None = None
    creditor_address: str | None = None
    creditor_city: str | None = None
    creditor_zip_code: str | None = None
    creditor_country: str | None = None
    signature_date: Date | None = None
    debtor_signature_ip: str | None = None
    signed: Boolean | None = None
    revocation_signature_date: Date | None = None
    debtor_identification_code: str | None = None
    debtor_reference_party_name: str | None = None
    debtor_reference_identification_code: str | None = None
    creditor_reference_party_name: str | None = None
    creditor_reference_identification_code: str | None = None
    contract_identification_number: str | None = None
    contract_description: str | None = None
    is_paper: Boolean | None = None
    sdd_type: str | None = None
    user_id_ultimate_creditor: Identifier | None = None
    created_ip: str | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    code_status: Identifier | None = None
    information_status: str | None = None


class RecallR(SnakeCaseModel):
    """Recall request received for an incoming SEPA credit transfer."""

    id: Identifier | None = None
    cxl_id: str | None = None
    status_id: Identifier | None = None
    status_label: str | None = None
    reason_code: str | None = None
    additional_information: str | None = None
    user_id: Identifier | None = None
    user_name: str | None = None
    user_status_id: Identifier | None = None
    wallet_id: Identifier | None = None
    wallet_status_id: Identifier | None = None
    wallet_activation_date: TimestampParis | None = None
    sctr_id: Identifier | None = None
    sctr_tx_id: Identifier | None = None
    sctr_amount: Amount | None = None
    sctr_currency: str | None = None
    sctr_settlement_date: TimestampParis | None = None
    # the upstream has sent both spellings
    sctr_settelment_date: TimestampParis | None = None
    sctr_dbtr_name: str | None = None
    received_date: TimestampParis | None = None
    payinrefund_id: Identifier | None = None


class SepaSddr(SnakeCaseModel):
    """Returned or rejected SEPA direct debit."""

    wallet_id: Identifier | None = None
    virtual_iban_id: Identifier | None = None
    transaction_id: Identifier | None = None
    sequence_type: str | None = None
    reject_reason_code: str | None = None
    interbank_settlement_amount: Amount | None = None
    requested_collection_date: Date | None = None
    mandate_id: str | None = None
    sepa_creditor_identifier: str | None = None
    date_of_signature: Date | None = None
    debitor_name: str | None = None
    debitor_address: str | None = None
    debitor_country: str | None = None
    creditor_name: str | None = None
    creditor_address: str | None = None
    creditor_country: str | None = None
    unstructured_field: str | None = None
    bankaccount_id: Identifier | None = None
    beneficiary_id: Identifier | None = None


class SepaSctr(SnakeCaseModel):
    """Returned SEPA credit transfer."""

    wallet_id: Identifier | None = None
    virtual_iban_id: Identifier | None = None
    transaction_id: Identifier | None = None
    interbank_settlement_amount: Amount | None = None
    debitor_name: str | None = None
    debitor_address: str | None = None
    debitor_country: str | None = None
    creditor_name: str | None = None
    creditor_address: str | None = None
    creditor_country: str | None = None
    unstructured_field: str | None = None
    return_reason_code: str | None = None

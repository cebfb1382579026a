"""Card-side resources: cards, card transactions, restriction groups, chargebacks.

Card-processor dates are in Europe/London, everything else in Europe/Paris.
"""

from datetime import datetime

from pydantic import Field

from treezor.models.base import TreezorModel
from treezor.types import Amount, Boolean, Date, Identifier, Integer, TimestampLondon, TimestampParis


class CardRestrictionGroupLimits(TreezorModel):
    payment_daily_limit: Amount | None = None
    mcc_restriction_groups: Identifier | None = None
    country_restriction_groups: Identifier | None = None
    merchant_id_restriction_groups: Identifier | None = None


class Card(TreezorModel):
    card_id: Identifier | None = None
    user_id: Identifier | None = None
    wallet_id: Identifier | None = None
    wallet_cardtransaction_id: Identifier | None = None
    mcc_restriction_group_id: Identifier | None = None
    merchant_restriction_group_id: Identifier | None = None
    country_restriction_group_id: Identifier | None = Field(None, alias="countryRestrictionGroupID")
    event_name: str | None = None
    event_alias: str | None = None
    public_token: str | None = None
    card_tag: str | None = None
    status_code: str | None = None
    is_live: Boolean | None = None
    pin_try_exceeds: Boolean | None = None
    masked_pan: str | None = None
    embossed_name: str | None = None
    expiry_date: Date | None = None
    cvv: str | None = Field(None, alias="CVV")
    start_date: Date | None = None
    end_date: Date | None = None
    country_code: str | None = None
    currency_code: str | None = None
    lang: str | None = None
    delivery_title: str | None = None
    delivery_lastname: str | None = None
    delivery_firstname: str | None = None
    delivery_address1: str | None = None
    delivery_address2: str | None = None
    delivery_address3: str | None = None
    delivery_city: str | None = None
    delivery_postcode: str | None = None
    delivery_country: str | None = None
    mobile_sent: str | None = None
    limits_group: str | None = None
    perms_group: str | None = None
    card_design: str | None = None
    virtual_converted: Boolean | None = None
    physical: Boolean | None = None
    option_atm: Boolean | None = None
    option_foreign: Boolean | None = None
    option_online: Boolean | None = None
    option_nfc: Boolean | None = None
    limit_atm_year: Integer | None = None
    limit_atm_month: Integer | None = None
    limit_atm_week: Integer | None = None
    limit_atm_day: Integer | None = None
    limit_atm_all: Integer | None = None
    limit_payment_year: Integer | None = None
    limit_payment_month: Integer | None = None
    limit_payment_week: Integer | None = None
    limit_payment_day: Integer | None = None
    limit_payment_all: Integer | None = None
    payment_daily_limit: Amount | None = None
    restriction_group_limits: list[CardRestrictionGroupLimits] | None = None
    total_atm_year: Amount | None = None
    total_atm_month: Amount | None = None
    total_atm_week: Amount | None = None
    total_atm_day: Amount | None = None
    total_atm_all: Amount | None = None
    total_payment_year: Amount | None = None
    total_payment_month: Amount | None = None
    total_payment_week: Amount | None = None
    total_payment_day: Amount | None = None
    total_payment_all: Amount | None = None
    created_by: Identifier | None = None
    created_date: TimestampLondon | None = None
    modified_by: Identifier | None = None
    modified_date: TimestampLondon | None = None
    cancellation_number: Integer | None = None
    total_rows: Integer | None = None


class CardTransaction(TreezorModel):
    """Card authorization or settlement as reported by the card processor."""

    cardtransaction_id: Identifier | None = None
    card_id: Identifier | None = None
    wallet_id: Identifier | None = None
    wallet_currency: str | None = None
    merchant_id: str | None = None
    merchant_name: str | None = None
    merchant_city: str | None = None
    merchant_country: str | None = None
    mcc_code: str | None = None
    payment_local_time: TimestampLondon | None = None
    public_token: str | None = None
    payment_amount: Amount | None = None
    payment_currency: str | None = None
    fees: Amount | None = None
    payment_country: str | None = None
    payment_id: Identifier | None = None
    payment_status: str | None = None
    payment_local_amount: Amount | None = None
    payment_local_date: Date | None = None
    is_3ds: Boolean | None = Field(None, alias="is3DS")
    pos_cardholder_presence: Boolean | None = None
    pos_postcode: str | None = None
    pos_country: str | None = None
    pos_terminal_id: str | None = None
    pos_card_presence: Boolean | None = None
    pan_entry_method: str | None = None
    authorization_note: str | None = None
    authorization_response_code: str | None = None
    authorization_issuer_id: str | None = None
    authorization_issuer_time: TimestampLondon | None = None
    authorization_mti: str | None = None
    authorized_balance: Amount | None = None
    limit_atm_year: Integer | None = None
    limit_atm_month: Integer | None = None
    limit_atm_week: Integer | None = None
    limit_atm_day: Integer | None = None
    limit_atm_all: Integer | None = None
    limit_payment_year: Integer | None = None
    limit_payment_month: Integer | None = None
    limit_payment_week: Integer | None = None
    limit_payment_day: Integer | None = None
    limit_payment_all: Integer | None = None
    total_limit_atm_year: Amount | None = None
    total_limit_atm_month: Amount | None = None
    total_limit_atm_week: Amount | None = None
    total_limit_atm_day: Amount | None = None
    total_limit_atm_all: Amount | None = None
    total_limit_payment_year: Amount | None = None
    total_limit_payment_month: Amount | None = None
    total_limit_payment_week: Amount | None = None
    total_limit_payment_day: Amount | None = None
    total_limit_payment_all: Amount | None = None
    total_rows: Integer | None = None


class CardDigitalization(TreezorModel):
    """Card provisioned into a mobile wallet (Apple Pay, Google Pay...)."""

    device_name: str | None = None
    device_type: str | None = None
    token_requestor: str | None = None
    card_digitalization_external_id: str | None = None
    card_id: Identifier | None = None
    # upstream spelling
    activation_code: str | None = Field(None, alias="activactionCode")
    activation_code_expiry: datetime | None = None
    activation_method: str | None = None
    expiration_date: Date | None = None


class RestrictionGroup(TreezorModel):
    """MCC, merchant id or country restriction group attached to cards."""

    id: Identifier | None = None
    name: str | None = None
    is_whitelist: Boolean | None = None
    merchants: list[Identifier] | None = None
    countries: list[Identifier] | None = None
    mcc: list[Identifier] | None = None
    status: str | None = None
    start_date: TimestampParis | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None


class Chargeback(TreezorModel):
    user_id: Identifier | None = None
    wallet_id: Identifier | None = None
    payin_id: Identifier | None = None
    transaction_reference: Identifier | None = None
    payin_refund_id: Identifier | None = None
    payment_method_id: Identifier | None = None
    payment_brand: str | None = None
    currency: str | None = None
    amount: str | None = None
    country: str | None = None
    is_refunded: Boolean | None = None
    chargeback_reason: str | None = None
    payin_created_date: TimestampParis | None = None
    payin_refund_created_date: TimestampParis | None = None
    chargeback_created_date: TimestampParis | None = None

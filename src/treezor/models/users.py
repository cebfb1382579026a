"""User and document resources."""

from pydantic import Field

from treezor.models.base import TreezorModel
from treezor.types import (
    Boolean,
    ControllingPersonType,
    Date,
    DocumentType,
    EmployeeType,
    Identifier,
    Integer,
    KYCLevel,
    KYCReview,
    Percentage,
    TimestampParis,
    UserType,
    WireStrEnum,
)


class ParentType(WireStrEnum):
    SHAREHOLDER = "shareholder"
    EMPLOYEE = "employee"
    LEADER = "leader"


class DocumentStatus(WireStrEnum):
    PENDING = "PENDING"
    CANCELED = "CANCELED"
    VALIDATED = "VALIDATED"


class User(TreezorModel):
    """Natural or legal person holding wallets and cards."""

    user_id: Identifier | None = None
    user_type_id: UserType | None = None
    user_status: str | None = None
    client_id: Identifier | None = None
    user_tag: str | None = None
    parent_user_id: Identifier | None = None
    parent_type: ParentType | None = None
    controlling_person_type: ControllingPersonType | None = None
    employee_type: EmployeeType | None = None
    entity_type: Integer | None = None
    specified_us_person: Boolean | None = Field(None, alias="specifiedUSPerson")
    title: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    middle_names: str | None = None
    birthday: Date | None = None
    email: str | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    postcode: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    country_name: str | None = None
    phone: str | None = None
    mobile: str | None = None
    nationality: str | None = None
    nationality_other: str | None = None
    place_of_birth: str | None = None
    birth_country: str | None = None
    occupation: str | None = None
    income_range: str | None = None
    legal_name: str | None = None
    legal_name_embossed: str | None = None
    legal_registration_number: str | None = None
    legal_tva_number: str | None = None
    legal_registration_date: Date | None = None
    legal_form: str | None = None
    legal_share_capital: Integer | None = None
    legal_sector: str | None = None
    legal_annual_turn_over: str | None = None
    legal_net_income_range: str | None = None
    legal_number_of_employee_range: str | None = None
    effective_beneficiary: Percentage | None = None
    kyc_level: KYCLevel | None = None
    kyc_review: KYCReview | None = None
    kyc_review_comment: str | None = None
    is_frozen: Boolean | None = None
    language: str | None = None
    opt_in_mailing: Boolean | None = None
    sepa_creditor_identifier: str | None = None
    tax_number: str | None = None
    tax_residence: str | None = None
    position: str | None = None
    personal_assets: str | None = None
    activity_outside_eu: Boolean | None = None
    economic_sanctions: Boolean | None = None
    resident_countries_sanctions: Boolean | None = None
    involved_sanctions: Boolean | None = None
    sanctions_questionnaire_date: Date | None = None
    timezone: str | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    wallet_count: Integer | None = None
    payin_count: Integer | None = None
    total_rows: Integer | None = None


class Document(TreezorModel):
    """KYC document uploaded for a user."""

    document_id: Identifier | None = None
    document_tag: str | None = None
    document_status: DocumentStatus | None = None
    document_type_id: DocumentType | None = None
    document_type: str | None = None
    residence_id: Identifier | None = None
    client_id: Identifier | None = None
    user_id: Identifier | None = None
    user_lastname: str | None = None
    user_firstname: str | None = None
    file_name: str | None = None
    temporary_url: str | None = None
    temporary_url_thumb: str | None = None
    created_date: TimestampParis | None = None
    modified_date: TimestampParis | None = None
    total_rows: Integer | None = None
    code_status: Identifier | None = None
    information_status: str | None = None

"""Tests for resource models built on the scalar codecs."""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from treezor.envelope import decode_single
from treezor.models import (
    Card,
    CardTransaction,
    Document,
    DocumentStatus,
    ParentType,
    Payin,
    RecallR,
    TreezorModel,
    User,
    Wallet,
)
from treezor.types import Amount, Date, KYCLevel, TimestampParis, UserType


class TestUser:
    def test_lenient_fields_normalized(self):
        user = User.model_validate(
            {
                "userId": 12,
                "userTypeId": "1",
                "isFrozen": "1",
                "kycLevel": 2,
                "legalShareCapital": "",
                "effectiveBeneficiary": "25.5",
                "birthday": "0000-00-00",
                "createdDate": "2024-07-01 12:00:00",
                "someNewUpstreamField": "ignored",
            }
        )
        assert user.user_id == "12"
        assert user.user_type_id is UserType.NATURAL_PERSON
        assert user.is_frozen
        assert user.kyc_level is KYCLevel.REGULAR
        assert user.legal_share_capital == 0
        assert user.effective_beneficiary == 25.5
        assert user.birthday == Date()
        assert user.created_date.value == datetime(2024, 7, 1, 10, 0, tzinfo=timezone.utc)

    def test_to_wire_uses_upstream_conventions(self):
        user = User.model_validate(
            {
                "userId": 12,
                "isFrozen": True,
                "legalShareCapital": "1000",
                "effectiveBeneficiary": 25,
                "birthday": "0000-00-00",
                "createdDate": "2024-07-01 12:00:00",
            }
        )
        assert user.to_wire() == {
            "userId": "12",
            "isFrozen": 1,
            "legalShareCapital": 1000,
            "effectiveBeneficiary": "25.0",
            "birthday": "0000-00-00",
            "createdDate": "2024-07-01 12:00:00",
        }

    def test_absent_differs_from_zero(self):
        user = User.model_validate({"walletCount": "0"})
        assert user.wallet_count == 0
        assert user.payin_count is None
        assert "payinCount" not in user.to_wire()
        assert user.to_wire()["walletCount"] == 0

    def test_wire_round_trip(self):
        raw = {"userId": "5", "specifiedUSPerson": 0, "modifiedDate": "0000-00-00 00:00:00", "kycReview": 3}
        user = User.model_validate(raw)
        assert User.model_validate(user.to_wire()) == user
        assert User.model_validate_json(user.to_json()) == user

    def test_populate_by_field_name(self):
        user = User(user_id="1", created_date=TimestampParis(datetime(2024, 1, 1, 12, 0)))
        assert user.to_wire() == {"userId": "1", "createdDate": "2024-01-01 12:00:00"}

    def test_empty_parent_type_is_absent(self):
        user = decode_single(b'{"users": [{"userId": "1", "parentType": ""}]}', "users", User)
        assert user.parent_type is None
        assert "parentType" not in user.to_wire()

    def test_unlisted_parent_type_kept(self):
        user = User.model_validate({"parentType": "partner"})
        assert isinstance(user.parent_type, ParentType)
        assert user.parent_type == "partner"
        assert user.to_wire() == {"parentType": "partner"}

    def test_known_parent_type(self):
        assert User.model_validate({"parentType": "leader"}).parent_type is ParentType.LEADER

    def test_bad_scalar_reports_type(self):
        with pytest.raises(ValidationError) as exc:
            User.model_validate({"birthday": "01/02/1990"})
        assert "treezor.Date" in str(exc.value)


class TestOtherResources:
    def test_wallet_amounts(self):
        wallet = Wallet.model_validate({"walletId": "3", "solde": "", "authorizedBalance": 99.9, "walletTypeId": "10"})
        assert wallet.solde == 0.0
        assert isinstance(wallet.authorized_balance, Amount)
        assert wallet.to_wire()["authorizedBalance"] == "99.9"
        assert wallet.to_wire()["walletTypeId"] == 10

    def test_card_irregular_keys(self):
        card = Card.model_validate({"CVV": "123", "countryRestrictionGroupID": 4, "optionNfc": "1"})
        assert card.cvv == "123"
        assert card.country_restriction_group_id == "4"
        assert card.to_wire() == {"CVV": "123", "countryRestrictionGroupID": "4", "optionNfc": 1}

    def test_card_dates_are_london(self):
        card = Card.model_validate({"createdDate": "2024-07-01 12:00:00"})
        assert card.created_date.value == datetime(2024, 7, 1, 11, 0, tzinfo=timezone.utc)

    def test_card_transaction_3ds(self):
        tx = CardTransaction.model_validate({"is3DS": "1", "paymentLocalDate": "2024-03-05"})
        assert tx.is_3ds
        assert tx.payment_local_date.value == date(2024, 3, 5)

    def test_payin_upstream_casing(self):
        payin = Payin.model_validate({"DbtrIBAN": "FR76", "creditorBIC": "BIC", "additionalData": {"card": {}}})
        assert payin.dbtr_iban == "FR76"
        assert payin.creditor_bic == "BIC"
        assert payin.additional_data == {"card": {}}

    def test_recallr_snake_case_keys(self):
        recall = RecallR.model_validate({"wallet_id": 1, "sctr_amount": "5.00", "received_date": "2024-01-01 09:00:00"})
        assert recall.wallet_id == "1"
        assert recall.to_wire() == {"wallet_id": "1", "sctr_amount": "5.0", "received_date": "2024-01-01 09:00:00"}

    def test_base_is_shared(self):
        assert issubclass(RecallR, TreezorModel)


class TestDocument:
    def test_unlisted_status_kept(self):
        doc = decode_single(b'{"documents": [{"documentId": 7, "documentStatus": "REFUSED"}]}', "documents", Document)
        assert doc.document_status == "REFUSED"
        assert str(doc.document_status) == "REFUSED"
        assert doc.to_wire() == {"documentId": "7", "documentStatus": "REFUSED"}

    def test_known_status(self):
        doc = Document.model_validate({"documentStatus": "VALIDATED", "documentTypeId": "9"})
        assert doc.document_status is DocumentStatus.VALIDATED
        assert doc.to_wire()["documentTypeId"] == 9

    def test_status_must_be_text(self):
        with pytest.raises(ValidationError):
            Document.model_validate({"documentStatus": 3})

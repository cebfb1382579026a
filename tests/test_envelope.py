"""Tests for the response envelope contract."""

import pytest
from pydantic import ValidationError

from treezor.envelope import Envelope, decode_envelope, decode_list, decode_single
from treezor.errors import EnvelopeCountError, EnvelopeError
from treezor.models import User, Wallet


def test_single_returns_the_item():
    assert decode_single(b'{"users":[{"id":"1"}]}', "users") == {"id": "1"}


def test_single_with_zero_items():
    with pytest.raises(EnvelopeCountError) as exc:
        decode_single(b'{"users":[]}', "users")
    assert exc.value.count == 0
    assert exc.value.resource == "users"
    assert "0" in str(exc.value)
    assert "users" in str(exc.value)


def test_single_with_two_items():
    with pytest.raises(EnvelopeCountError) as exc:
        decode_single(b'{"users":[{},{}]}', "users")
    assert exc.value.count == 2
    assert "2" in str(exc.value)


def test_count_error_is_an_envelope_error():
    with pytest.raises(EnvelopeError):
        decode_single('{"wallets":[]}', "wallets")


def test_list_accepts_any_count():
    assert decode_list(b'{"users":[]}', "users") == []
    assert decode_list(b'{"users":[{"id":"1"},{"id":"2"}]}', "users") == [{"id": "1"}, {"id": "2"}]


def test_list_keeps_order():
    body = b'{"wallets":[{"walletId":3},{"walletId":1},{"walletId":2}]}'
    wallets = decode_list(body, "wallets", Wallet)
    assert [w.wallet_id for w in wallets] == ["3", "1", "2"]


def test_null_under_key_is_empty():
    assert decode_list(b'{"users":null}', "users") == []


def test_missing_key():
    with pytest.raises(EnvelopeError) as exc:
        decode_single(b'{"wallets":[{}]}', "users")
    assert "'users'" in str(exc.value)
    assert exc.value.details == {"keys": ["wallets"]}


def test_non_array_value():
    with pytest.raises(EnvelopeError):
        decode_list(b'{"users":{"id":"1"}}', "users")


@pytest.mark.parametrize("body", [b"not json", b"[]", b'"users"', b""])
def test_body_must_be_an_object(body):
    with pytest.raises(EnvelopeError):
        decode_single(body, "users")


def test_model_decoding_applies_scalar_codecs():
    user = decode_single(b'{"users":[{"userId":12,"isFrozen":"0","walletCount":""}]}', "users", User)
    assert isinstance(user, User)
    assert user.user_id == "12"
    assert not user.is_frozen
    assert user.wallet_count == 0


def test_model_failure_names_the_field_type():
    with pytest.raises(EnvelopeError) as exc:
        decode_single(b'{"users":[{"userId":"1","walletCount":"many"}]}', "users", User)
    assert "treezor.Integer" in str(exc.value)
    assert "item 0" in str(exc.value)
    assert isinstance(exc.value.__cause__, ValidationError)


def test_envelope_object():
    env = decode_envelope({"users": [{"id": "1"}]}, "users")
    assert isinstance(env, Envelope)
    assert len(env) == 1
    assert list(env) == [{"id": "1"}]
    assert env.single() == {"id": "1"}

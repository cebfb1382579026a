"""Tests for the Date codec and its 0000-00-00 sentinel."""

from datetime import date, datetime, timezone

import pytest

from treezor.errors import ScalarDecodeError
from treezor.types import DATE_SENTINEL, Date


def test_decode_date():
    d = Date.decode(b'"2024-03-05"')
    assert d.value == date(2024, 3, 5)
    assert d.original_payload == "2024-03-05"


def test_encode_date():
    assert Date(date(2024, 3, 5)).encode() == b'"2024-03-05"'


def test_sentinel_decodes_to_absent():
    d = Date.decode(b'"0000-00-00"')
    assert d.value is None
    assert not d
    assert d.original_payload == DATE_SENTINEL


def test_absent_encodes_to_sentinel():
    assert Date().encode() == b'"0000-00-00"'


@pytest.mark.parametrize("raw", [b'"0000-00-00"', b'"2024-02-29"', b'"1999-12-31"'])
def test_round_trip(raw):
    d = Date.decode(raw)
    assert Date.decode(d.encode()) == d
    assert d.encode() == raw


def test_original_payload_not_part_of_equality():
    assert Date(date(2024, 1, 1), "2024-01-01") == Date(date(2024, 1, 1))


@pytest.mark.parametrize(
    "raw",
    [b'"2024/03/05"', b'"05-03-2024"', b'"2024-3-5"', b'"2024-13-01"', b'"2024-02-30"', b'""', b'"2024-03-05 10:00:00"', b"20240305"],
)
def test_rejects_malformed(raw):
    with pytest.raises(ScalarDecodeError) as exc:
        Date.decode(raw)
    assert "treezor.Date" in str(exc.value)


def test_of_keeps_calendar_day():
    moment = datetime(2024, 3, 5, 23, 30, tzinfo=timezone.utc)
    assert Date.of(moment) == Date(date(2024, 3, 5))


def test_str_is_wire_text():
    assert str(Date(date(2024, 3, 5))) == "2024-03-05"
    assert str(Date()) == "0000-00-00"

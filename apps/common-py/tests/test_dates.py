"""Tests for date helpers and identifier generation."""

from datetime import date

import pytest

from common.utils.dates import format_future_date, parse_days
from common.utils.ids import generate_id


class TestParseDays:
    @pytest.mark.parametrize(("text", "expected"), [("7", 7), ("0", 0), ("-3", -3), ("+2", 2), (" 10 ", 10)])
    def test_parses_integers(self, text, expected):
        assert parse_days(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "7abc", "1.5", "0x10", "1e3"])
    def test_rejects_non_integers(self, text):
        with pytest.raises(ValueError, match="Invalid number of days"):
            parse_days(text)


class TestFormatFutureDate:
    def test_adds_days(self):
        assert format_future_date(7, today=date(2024, 2, 25)) == "2024-03-03"

    def test_zero_and_negative_offsets(self):
        assert format_future_date(0, today=date(2024, 1, 1)) == "2024-01-01"
        assert format_future_date(-1, today=date(2024, 1, 1)) == "2023-12-31"

    def test_defaults_to_today(self):
        assert format_future_date(0) == date.today().isoformat()

    def test_pads_small_years(self):
        assert format_future_date(0, today=date(5, 1, 2)) == "0005-01-02"

    @pytest.mark.parametrize("days", [10**7, -(10**7), 10**12])
    def test_out_of_range(self, days):
        with pytest.raises(ValueError, match="out of range"):
            format_future_date(days, today=date(2024, 1, 1))


def test_generate_id_is_unique_uuid_text():
    first, second = generate_id(), generate_id()

    assert isinstance(first, str)
    assert len(first) == 36
    assert first.count("-") == 4
    assert first != second


def test_parse_days_rejects_oversized_numbers():
    with pytest.raises(ValueError, match="Invalid number of days"):
        parse_days("9" * 5000)

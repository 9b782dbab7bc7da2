"""
Tests for the date range storage format and its display rendering
"""
import logging
from datetime import date

import pytest

from app.helpers.date_ranges import (
    encode_date_ranges,
    decode_date_ranges,
    format_date_range,
    format_date_ranges,
    parse_stored_date,
)
from app.helpers.exception_handler import MalformedStoredDate
from app.schemas.sche_medication import DateRange


class TestEncode:

    def test_single_closed_range(self):
        ranges = [DateRange(start_date=date(2023, 1, 1), end_date=date(2023, 6, 30))]
        assert encode_date_ranges(ranges) == "2023-01-01_2023-06-30"

    def test_open_sides_are_empty(self):
        ranges = [
            DateRange(start_date=None, end_date=date(2022, 3, 4)),
            DateRange(start_date=date(2023, 9, 1), end_date=None),
        ]
        assert encode_date_ranges(ranges) == "_2022-03-04;2023-09-01_"

    @pytest.mark.parametrize("ranges", [None, [], ()])
    def test_empty_encodes_to_none(self, ranges):
        assert encode_date_ranges(ranges) is None


class TestDecode:

    def test_two_ranges_second_ongoing(self):
        """Encoding then decoding keeps both ranges and the open end"""
        ranges = [
            DateRange(start_date=date(2023, 1, 1), end_date=date(2023, 6, 30)),
            DateRange(start_date=date(2023, 9, 1), end_date=None),
        ]
        decoded = decode_date_ranges(encode_date_ranges(ranges))

        assert decoded == tuple(ranges)
        assert decoded[1].end_date is None

    def test_both_sides_absent(self):
        ranges = [DateRange()]
        assert decode_date_ranges(encode_date_ranges(ranges)) == (DateRange(),)

    def test_order_is_insertion_order(self):
        ranges = [
            DateRange(start_date=date(2024, 1, 1), end_date=None),
            DateRange(start_date=date(2020, 1, 1), end_date=date(2020, 2, 1)),
        ]
        assert decode_date_ranges(encode_date_ranges(ranges)) == tuple(ranges)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_decodes_to_empty(self, value):
        assert decode_date_ranges(value) == ()

    def test_malformed_side_degrades_to_absent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="app.helpers.date_ranges"):
            decoded = decode_date_ranges("2023-13-45_2023-06-30;garbage")

        assert decoded == (
            DateRange(start_date=None, end_date=date(2023, 6, 30)),
            DateRange(start_date=None, end_date=None),
        )
        assert "2023-13-45" in caplog.text

    def test_token_without_separator_is_start_only(self):
        assert decode_date_ranges("2023-01-01") == (DateRange(start_date=date(2023, 1, 1)),)


class TestParseStoredDate:

    def test_lenient_returns_none(self):
        assert parse_stored_date("01/02/2023") is None

    def test_strict_raises(self):
        with pytest.raises(MalformedStoredDate) as exc_info:
            parse_stored_date("01/02/2023", strict=True)
        assert exc_info.value.value == "01/02/2023"

    def test_only_dashed_iso_dates_accepted(self):
        assert parse_stored_date("2023-01-01") == date(2023, 1, 1)
        assert parse_stored_date("20230101") is None
        assert parse_stored_date("2023-01-01T00:00") is None

    def test_compact_date_rejected_when_strict(self):
        with pytest.raises(MalformedStoredDate):
            parse_stored_date("20230101", strict=True)

    def test_blank_is_absent_even_when_strict(self):
        assert parse_stored_date("  ", strict=True) is None


class TestFormat:

    def test_closed_range(self):
        assert format_date_range(DateRange(start_date=date(2023, 1, 1), end_date=date(2023, 6, 30))) == \
            "2023-01-01 to 2023-06-30"

    def test_open_end_is_present(self):
        assert str(DateRange(start_date=date(2023, 9, 1))) == "2023-09-01 to Present"

    def test_missing_start_is_unknown(self):
        assert str(DateRange(end_date=date(2023, 9, 1))) == "Unknown Start to 2023-09-01"

    def test_many_ranges_join_with_newline(self):
        ranges = [
            DateRange(start_date=date(2023, 1, 1), end_date=date(2023, 6, 30)),
            DateRange(),
        ]
        assert format_date_ranges(ranges) == "2023-01-01 to 2023-06-30\nUnknown Start to Present"

    @pytest.mark.parametrize("ranges", [None, []])
    def test_nothing_renders_empty(self, ranges):
        assert format_date_ranges(ranges) == ""

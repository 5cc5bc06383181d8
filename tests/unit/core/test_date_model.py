# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for canonical date parsing and formatting.
"""

from datetime import date, timedelta

import pytest

from core.date_picker import date_model
from core.date_picker.exceptions import InvalidDateError


def test_parse_accepts_leap_day_in_leap_year():
    assert date_model.parse("2024-02-29") == "2024-02-29"


def test_parse_rejects_leap_day_in_common_year():
    assert date_model.parse("2023-02-29") is None


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        None,
        "2024-13-01",
        "2024-04-31",
        "2024-00-10",
        "2024-01-00",
        "2024/01/10",
        "2024-01",
        "2024-01-10-05",
        "24-01-10",
        "2024-aa-10",
        "2024-+1-10",
        "2024--10",
        "2024-001-10",
        "0000-01-01",
        "２０２４-01-10",
    ],
)
def test_parse_returns_none_for_bad_input(text):
    assert date_model.parse(text) is None


def test_parse_pads_single_digit_groups_and_strips_whitespace():
    assert date_model.parse("2024-3-7") == "2024-03-07"
    assert date_model.parse("  2024-03-07\n") == "2024-03-07"


def test_parse_strict_raises_with_offending_text():
    with pytest.raises(InvalidDateError) as exc_info:
        date_model.parse_strict("2023-02-30")

    assert exc_info.value.text == "2023-02-30"


def test_round_trip_for_every_day_1900_to_2100():
    current = date(1900, 1, 1)
    end = date(2100, 12, 31)
    while current <= end:
        text = date_model.format_date(current)
        assert date_model.parse(text) == text
        assert date_model.to_date(text) == current
        current += timedelta(days=1)


def test_format_date_zero_pads_month_and_day():
    assert date_model.format_date(date(2024, 1, 5)) == "2024-01-05"
    assert date_model.format_date((987, 12, 31)) == "0987-12-31"


def test_display_uses_day_month_year():
    assert date_model.display("2024-02-09") == "09/02/2024"


def test_display_is_empty_for_missing_or_invalid_value():
    assert date_model.display("") == ""
    assert date_model.display("2023-02-29") == ""


def test_today_reads_injected_clock():
    assert date_model.today(lambda: date(2025, 1, 2)) == "2025-01-02"

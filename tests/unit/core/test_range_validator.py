# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for selectable-range checks.
"""

import pytest

from core.date_picker.exceptions import OutOfRangeError
from core.date_picker.models import DateRange
from core.date_picker.range_validator import (
    ensure_within_range,
    is_selectable,
    within_range,
)

JANUARY = DateRange(min="2024-01-01", max="2024-01-31")


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("2023-12-31", False),
        ("2024-01-01", True),
        ("2024-01-15", True),
        ("2024-01-31", True),
        ("2024-02-01", False),
    ],
)
def test_within_range_is_inclusive(candidate, expected):
    assert within_range(candidate, JANUARY) is expected


def test_open_ended_ranges():
    assert within_range("1900-01-01", DateRange(max="2024-01-31"))
    assert not within_range("2024-02-01", DateRange(max="2024-01-31"))
    assert within_range("2999-01-01", DateRange(min="2024-01-01"))
    assert not within_range("2023-12-31", DateRange(min="2024-01-01"))


def test_missing_range_allows_everything():
    assert within_range("2024-06-01", None)
    assert within_range("2024-06-01", DateRange())


def test_ensure_within_range_raises_out_of_range():
    with pytest.raises(OutOfRangeError) as exc_info:
        ensure_within_range("2024-02-01", JANUARY)

    assert exc_info.value.candidate == "2024-02-01"
    assert exc_info.value.maximum == "2024-01-31"


def test_is_selectable_rejects_invalid_dates():
    assert not is_selectable("2024-01-32", JANUARY)
    assert not is_selectable(None, JANUARY)
    assert is_selectable("2024-01-10", JANUARY)

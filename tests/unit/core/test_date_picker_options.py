# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for DatePickerOptions.
"""

from dataclasses import FrozenInstanceError, replace

import pytest

from core.date_picker.models import DatePickerOptions, DateRange, YearRange


class _FakeConfig:
    def __init__(self, data):
        self._data = data

    def get(self, key, default=None):
        return self._data.get(key, default)


def test_empty_and_invalid_bounds_are_dropped():
    options = DatePickerOptions(min="", max="2024-02-30")

    assert options.min is None
    assert options.max is None
    assert options.date_range == DateRange()


def test_bounds_are_canonicalized():
    options = DatePickerOptions(min="2024-1-5")
    assert options.min == "2024-01-05"


def test_default_year_range_centres_on_current_year():
    assert DatePickerOptions().resolve_year_range(2024) == YearRange(1974, 2034)


def test_explicit_year_range_wins():
    options = DatePickerOptions(year_range=YearRange(1944, 2024))
    assert options.resolve_year_range(2030) == YearRange(1944, 2024)


def test_from_config_reads_date_picker_section():
    config = _FakeConfig(
        {
            "date_picker": {
                "min": "2000-01-01",
                "show_today": True,
                "show_clear": True,
                "years_ahead": 0,
                "years_back": 80,
                "year_row_height": 32,
                "placeholder": "Date of birth",
                "with_icon": False,
            }
        }
    )

    options = DatePickerOptions.from_config(config, current_year=2024, hint="optional")

    assert options.min == "2000-01-01"
    assert options.max is None
    assert options.show_today and options.show_clear
    assert options.year_range == YearRange(1944, 2024)
    assert options.year_row_height == 32
    assert options.placeholder == "Date of birth"
    assert not options.with_icon
    assert options.hint == "optional"


def test_options_are_immutable_and_replace_cleans_bounds():
    options = DatePickerOptions(min="2024-01-01")

    with pytest.raises(FrozenInstanceError):
        options.min = "2023-02-30"

    changed = replace(options, max="2023-02-30", show_today=True)
    assert changed.min == "2024-01-01"
    assert changed.max is None
    assert changed.show_today

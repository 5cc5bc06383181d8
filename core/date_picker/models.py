# SPDX-License-Identifier: Apache-2.0
#
# Copyright (c) 2024-2025 DatePick Contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Value types shared by the date picker engine and its widgets.
"""

import logging
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Any, List, Optional

from core.date_picker import date_model
from core.date_picker.constants import (
    DEFAULT_PLACEHOLDER,
    DEFAULT_YEAR_ROW_HEIGHT,
    DEFAULT_YEARS_AHEAD,
    DEFAULT_YEARS_BACK,
    MONTH_NAMES,
)

logger = logging.getLogger("datepick.core.models")


@dataclass(frozen=True)
class ViewMonth:
    """
    Month shown by the calendar grid.

    ``month`` is zero-based (0 = January, 11 = December); the value always
    stands for the first day of that month. ``year`` is limited to the
    years ``datetime.date`` can represent.
    """

    year: int
    month: int

    def __post_init__(self):
        if not 0 <= self.month <= 11:
            raise ValueError(f"month must be within 0..11, got {self.month}")
        if not MINYEAR <= self.year <= MAXYEAR:
            raise ValueError(f"year must be within {MINYEAR}..{MAXYEAR}, got {self.year}")

    @classmethod
    def from_date(cls, value: date) -> "ViewMonth":
        """Return the view month containing ``value``."""
        return cls(value.year, value.month - 1)

    @property
    def month_number(self) -> int:
        """One-based month number (1 = January)."""
        return self.month + 1

    @property
    def first_day(self) -> date:
        return date(self.year, self.month_number, 1)

    @property
    def label(self) -> str:
        """Header text such as ``February 2024``."""
        return f"{MONTH_NAMES[self.month]} {self.year}"


@dataclass(frozen=True)
class CalendarCell:
    """One grid slot: blank padding when ``date`` is None, else a day."""

    date: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        return self.date is None

    @property
    def day(self) -> Optional[int]:
        if self.date is None:
            return None
        return int(self.date.rsplit("-", 1)[1])


BLANK = CalendarCell()


@dataclass(frozen=True)
class DateRange:
    """Optional inclusive bounds on selectable dates (canonical strings)."""

    min: Optional[str] = None
    max: Optional[str] = None


def _clip_year(year: int) -> int:
    return min(max(year, MINYEAR), MAXYEAR)


@dataclass(frozen=True)
class YearRange:
    """
    Inclusive span of years offered by the year quick-picker.

    Bounds are reordered when reversed and clipped to the years
    ``datetime.date`` supports.
    """

    from_year: int
    to_year: int

    def __post_init__(self):
        if self.from_year > self.to_year:
            lower, upper = self.to_year, self.from_year
            object.__setattr__(self, "from_year", lower)
            object.__setattr__(self, "to_year", upper)
        object.__setattr__(self, "from_year", _clip_year(self.from_year))
        object.__setattr__(self, "to_year", _clip_year(self.to_year))

    @classmethod
    def around(
        cls,
        year: int,
        ahead: int = DEFAULT_YEARS_AHEAD,
        back: int = DEFAULT_YEARS_BACK,
    ) -> "YearRange":
        """Span from ``year - back`` to ``year + ahead``."""
        return cls(year - back, year + ahead)

    def descending(self) -> List[int]:
        """Years from newest to oldest."""
        return list(range(self.to_year, self.from_year - 1, -1))


def _clean_bound(name: str, value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    canonical = date_model.parse(value)
    if canonical is None:
        logger.warning("Ignoring invalid %s bound: %r", name, value)
    return canonical


@dataclass(frozen=True)
class DatePickerOptions:
    """
    Host configuration for a date picker.

    Options are immutable; derive changed copies with
    ``dataclasses.replace`` so date bounds are cleaned again.

    Attributes:
        min: Earliest selectable date (canonical), or None
        max: Latest selectable date (canonical), or None
        year_range: Years listed by the year picker; None means the default
            span around the current year
        show_today: Offer the "Today" action
        show_clear: Offer the "Clear" action
        disabled: Ignore trigger activation
        placeholder: Trigger text when no date is selected
        with_icon: Show a calendar icon on the trigger
        error: Render the picker in its error style
        hint: Help text shown under the trigger
        year_row_height: Row height used to scroll the year list
    """

    min: Optional[str] = None
    max: Optional[str] = None
    year_range: Optional[YearRange] = None
    show_today: bool = False
    show_clear: bool = False
    disabled: bool = False
    placeholder: str = DEFAULT_PLACEHOLDER
    with_icon: bool = True
    error: bool = False
    hint: str = ""
    year_row_height: int = DEFAULT_YEAR_ROW_HEIGHT

    def __post_init__(self):
        object.__setattr__(self, "min", _clean_bound("min", self.min))
        object.__setattr__(self, "max", _clean_bound("max", self.max))

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.min, self.max)

    def resolve_year_range(self, current_year: int) -> YearRange:
        """Return the configured year span, or the default around ``current_year``."""
        if self.year_range is not None:
            return self.year_range
        return YearRange.around(current_year)

    @classmethod
    def from_config(cls, config: Any, current_year: Optional[int] = None, **overrides) -> "DatePickerOptions":
        """
        Build options from the ``date_picker`` section of a config manager.

        Args:
            config: Object exposing ``get(key, default)`` with dotted keys
            current_year: Year the default year span is centred on
            **overrides: Field values that take precedence over configuration

        Returns:
            DatePickerOptions instance
        """
        if current_year is None:
            current_year = date.today().year

        section = config.get("date_picker", {}) or {}
        year_range = YearRange.around(
            current_year,
            ahead=section.get("years_ahead", DEFAULT_YEARS_AHEAD),
            back=section.get("years_back", DEFAULT_YEARS_BACK),
        )

        values = {
            "min": section.get("min"),
            "max": section.get("max"),
            "year_range": year_range,
            "show_today": section.get("show_today", False),
            "show_clear": section.get("show_clear", False),
            "placeholder": section.get("placeholder", DEFAULT_PLACEHOLDER),
            "with_icon": section.get("with_icon", True),
            "year_row_height": section.get("year_row_height", DEFAULT_YEAR_ROW_HEIGHT),
        }
        values.update(overrides)
        return cls(**values)

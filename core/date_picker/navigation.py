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
Month navigation and quick pickers.

Owns the view month shown by the grid. Month stepping rolls over year
boundaries; the month and year pickers jump directly to a month.
"""

import logging
from datetime import MAXYEAR, MINYEAR, date
from typing import List, Optional, Sequence, Tuple

from core.date_picker import date_model
from core.date_picker.constants import (
    DEFAULT_YEAR_ROW_HEIGHT,
    MONTH_NAMES,
    YEAR_SCROLL_LEAD_ROWS,
)
from core.date_picker.date_model import Clock
from core.date_picker.models import ViewMonth, YearRange

logger = logging.getLogger("datepick.core.navigation")

_FIRST_MONTH_INDEX = MINYEAR * 12
_LAST_MONTH_INDEX = MAXYEAR * 12 + 11


def add_months(view_month: ViewMonth, delta: int) -> ViewMonth:
    """
    Step a view month forward or backward.

    Args:
        view_month: Starting month
        delta: Number of months to move (negative moves back)

    Returns:
        The resulting month, with overflow folded into the year. Steps past
        January of ``MINYEAR`` or December of ``MAXYEAR`` stop at that month.
    """
    index = view_month.year * 12 + view_month.month + delta
    index = min(max(index, _FIRST_MONTH_INDEX), _LAST_MONTH_INDEX)
    year, month = divmod(index, 12)
    return ViewMonth(year, month)


def year_scroll_offset(years: Sequence[int], year: int, row_height: int) -> int:
    """
    Scroll offset that brings ``year`` into view in a year list.

    Keeps two rows of context above the target. Returns 0 when the year
    is not listed.
    """
    try:
        index = list(years).index(year)
    except ValueError:
        return 0
    return max(0, index * row_height - YEAR_SCROLL_LEAD_ROWS * row_height)


class NavigationController:
    """Tracks the view month and applies navigation events to it."""

    def __init__(
        self,
        view_month: Optional[ViewMonth] = None,
        year_range: Optional[YearRange] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the navigation controller.

        Args:
            view_month: Initial month; defaults to the current month
            year_range: Years offered by the year picker; defaults to
                ten years ahead and fifty years back from the current year
            clock: Source of today's date
        """
        self._clock = clock
        current = self._today()
        self._view_month = view_month or ViewMonth.from_date(current)
        self._year_range = year_range or YearRange.around(current.year)

    def _today(self) -> date:
        return self._clock() if self._clock is not None else date.today()

    @property
    def view_month(self) -> ViewMonth:
        return self._view_month

    @property
    def year_range(self) -> YearRange:
        return self._year_range

    @year_range.setter
    def year_range(self, value: YearRange) -> None:
        self._year_range = value

    def go_to(self, view_month: ViewMonth) -> ViewMonth:
        """Show ``view_month``."""
        if view_month != self._view_month:
            logger.debug("View month %s -> %s", self._view_month.label, view_month.label)
        self._view_month = view_month
        return view_month

    def anchor(self, value: Optional[str]) -> ViewMonth:
        """Show the month of ``value``, or the current month if it is not a date."""
        selected = date_model.to_date(value)
        return self.go_to(ViewMonth.from_date(selected or self._today()))

    def step(self, delta: int) -> ViewMonth:
        return self.go_to(add_months(self._view_month, delta))

    def previous_month(self) -> ViewMonth:
        return self.step(-1)

    def next_month(self) -> ViewMonth:
        return self.step(1)

    # Month quick-picker

    @staticmethod
    def month_names() -> Tuple[str, ...]:
        return MONTH_NAMES

    def select_month(self, month: int) -> bool:
        """
        Jump to ``month`` of the current view year.

        Args:
            month: Zero-based month index

        Returns:
            True if the view changed to the requested month
        """
        if not isinstance(month, int) or not 0 <= month <= 11:
            logger.debug("Ignoring month selection outside 0..11: %r", month)
            return False
        self.go_to(ViewMonth(self._view_month.year, month))
        return True

    # Year quick-picker

    def year_options(self) -> List[int]:
        """Years offered by the year picker, newest first."""
        return self._year_range.descending()

    def select_year(self, year: int) -> bool:
        """
        Jump to ``year`` keeping the current view month.

        Returns:
            True if the year is listed and the view changed to it
        """
        if year not in self.year_options():
            logger.debug("Ignoring year selection outside picker range: %r", year)
            return False
        self.go_to(ViewMonth(year, self._view_month.month))
        return True

    def year_scroll_offset(self, row_height: int = DEFAULT_YEAR_ROW_HEIGHT) -> int:
        """Scroll offset bringing the view year into sight in the year list."""
        return year_scroll_offset(self.year_options(), self._view_month.year, row_height)

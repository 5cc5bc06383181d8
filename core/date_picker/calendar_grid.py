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
Month grid construction for the date picker.

Pure calendar calculations, no UI dependencies. Grids start on Sunday and
always hold complete weeks.
"""

from typing import List, Sequence

from core.date_picker.constants import DAYS_PER_WEEK
from core.date_picker.date_model import format_date
from core.date_picker.models import BLANK, CalendarCell, ViewMonth

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """
    Return the number of days in a month.

    Args:
        year: Calendar year
        month: Zero-based month (0 = January)
    """
    if month == 1 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def weekday_index(view_month: ViewMonth) -> int:
    """Weekday of the month's first day, 0 = Sunday .. 6 = Saturday."""
    # date.weekday() counts from Monday
    return (view_month.first_day.weekday() + 1) % DAYS_PER_WEEK


def build_grid(view_month: ViewMonth) -> List[CalendarCell]:
    """
    Build the day cells for a month.

    Leading blanks push day 1 under its weekday column, then one cell per
    day, then trailing blanks to complete the last week.

    Args:
        view_month: Month to lay out

    Returns:
        New list of cells whose length is a multiple of 7
    """
    cells: List[CalendarCell] = [BLANK] * weekday_index(view_month)

    year, month_number = view_month.year, view_month.month_number
    for day in range(1, days_in_month(year, view_month.month) + 1):
        cells.append(CalendarCell(format_date((year, month_number, day))))

    remainder = len(cells) % DAYS_PER_WEEK
    if remainder:
        cells.extend([BLANK] * (DAYS_PER_WEEK - remainder))
    return cells


def weeks(cells: Sequence[CalendarCell]) -> List[List[CalendarCell]]:
    """Split a grid into rows of seven cells."""
    return [
        list(cells[start:start + DAYS_PER_WEEK])
        for start in range(0, len(cells), DAYS_PER_WEEK)
    ]

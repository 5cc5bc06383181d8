# SPDX-License-Identifier: Apache-2.0
"""
Constants for the date picker.

Defines selection states, calendar labels and defaults to avoid hardcoded
values in the engine and the widgets.
"""

from enum import Enum


class SelectionState(Enum):
    """Interaction states of a date picker."""

    CLOSED = "closed"
    OPEN = "open"
    MONTH_PICKER_OPEN = "month_picker_open"
    YEAR_PICKER_OPEN = "year_picker_open"

    @property
    def is_open(self) -> bool:
        """Return True for every state other than CLOSED."""
        return self is not SelectionState.CLOSED


class RejectReason:
    """Reasons a selection is refused without reaching the host."""

    INVALID_INPUT = "invalid_input"
    OUT_OF_RANGE = "out_of_range"


MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Grid columns start on Sunday
WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

DAYS_PER_WEEK = 7

CANONICAL_SEPARATOR = "-"
DISPLAY_SEPARATOR = "/"

DEFAULT_PLACEHOLDER = "Select date"

# Year quick-picker defaults, relative to the current year
DEFAULT_YEARS_AHEAD = 10
DEFAULT_YEARS_BACK = 50

# Row height (px) of the year list, used to scroll the active year into view
DEFAULT_YEAR_ROW_HEIGHT = 28
YEAR_SCROLL_LEAD_ROWS = 2

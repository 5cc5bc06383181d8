# SPDX-License-Identifier: Apache-2.0
"""Calendar date-selection engine."""

from core.date_picker.constants import SelectionState
from core.date_picker.date_model import display, format_date, parse, parse_strict
from core.date_picker.models import (
    CalendarCell,
    DatePickerOptions,
    DateRange,
    ViewMonth,
    YearRange,
)
from core.date_picker.navigation import NavigationController, add_months
from core.date_picker.state_machine import SelectionStateMachine

__all__ = [
    'CalendarCell',
    'DatePickerOptions',
    'DateRange',
    'NavigationController',
    'SelectionState',
    'SelectionStateMachine',
    'ViewMonth',
    'YearRange',
    'add_months',
    'display',
    'format_date',
    'parse',
    'parse_strict',
]

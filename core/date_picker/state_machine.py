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
Interaction lifecycle of a date picker.

The state machine reacts to one UI event at a time. Accepted selections
close the picker and reach the host through a single ``on_change`` call;
rejected ones leave state and value untouched.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from core.date_picker import date_model
from core.date_picker.calendar_grid import build_grid
from core.date_picker.constants import RejectReason, SelectionState
from core.date_picker.date_model import Clock
from core.date_picker.exceptions import InvalidDateError, OutOfRangeError
from core.date_picker.listeners import InteractionListeners, NullInteractionListeners
from core.date_picker.models import CalendarCell, DatePickerOptions, ViewMonth
from core.date_picker.navigation import NavigationController
from core.date_picker.range_validator import ensure_within_range, within_range

logger = logging.getLogger("datepick.core.state_machine")

ChangeCallback = Callable[[str], None]


class SelectionStateMachine:
    """
    Owns the open/closed states of a date picker and commits selections.

    The host controls the value: it passes the current value in, receives
    commits through ``on_change`` and may push a new value with
    ``set_value``.
    """

    def __init__(
        self,
        value: Optional[str] = "",
        on_change: Optional[ChangeCallback] = None,
        options: Optional[DatePickerOptions] = None,
        listeners: Optional[InteractionListeners] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the state machine in the CLOSED state.

        Args:
            value: Current canonical date or ''
            on_change: Called once per accepted commit with the new value
            options: Picker configuration
            listeners: Outside-interaction/Escape subscriptions, held only
                while the picker is open
            clock: Source of today's date
        """
        self._on_change = on_change
        self._options = options or DatePickerOptions()
        self._listeners = listeners or NullInteractionListeners()
        self._listeners_held = False
        self._clock = clock
        self._state = SelectionState.CLOSED
        self._disposed = False
        self._value = ""

        self.set_value(value)
        self._navigation = NavigationController(
            year_range=self._options.resolve_year_range(self._today().year),
            clock=clock,
        )
        self._navigation.anchor(self._value)

    def _today(self) -> date:
        return self._clock() if self._clock is not None else date.today()

    # Read-only state

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def value(self) -> str:
        return self._value

    @property
    def has_value(self) -> bool:
        return bool(self._value)

    @property
    def options(self) -> DatePickerOptions:
        return self._options

    @property
    def navigation(self) -> NavigationController:
        return self._navigation

    @property
    def view_month(self) -> ViewMonth:
        return self._navigation.view_month

    @property
    def display_value(self) -> str:
        """``dd/mm/yyyy`` text of the value, or '' without a selection."""
        return date_model.display(self._value)

    @property
    def trigger_text(self) -> str:
        return self.display_value or self._options.placeholder

    @property
    def listeners_active(self) -> bool:
        return self._listeners_held

    @property
    def can_show_today(self) -> bool:
        return self._options.show_today

    @property
    def can_clear(self) -> bool:
        return self._options.show_clear and self.has_value

    def grid(self) -> List[CalendarCell]:
        """Day cells of the current view month."""
        return build_grid(self._navigation.view_month)

    def is_selectable(self, candidate: Optional[str]) -> bool:
        """True when a cell for ``candidate`` should render enabled."""
        canonical = date_model.parse(candidate)
        return canonical is not None and within_range(canonical, self._options.date_range)

    def is_selected(self, candidate: Optional[str]) -> bool:
        return bool(candidate) and candidate == self._value

    def is_today(self, candidate: Optional[str]) -> bool:
        return bool(candidate) and candidate == date_model.today(self._clock)

    # Host updates

    def set_value(self, value: Optional[str]) -> None:
        """
        Replace the current value without emitting a change.

        Text that is not a real date is treated as no selection.
        """
        canonical = date_model.parse(value)
        if canonical is None and value:
            logger.debug("Current value %r is not a valid date; showing no selection", value)
        self._value = canonical or ""

    def set_options(self, options: DatePickerOptions) -> None:
        """Apply new configuration; disabling closes an open picker."""
        self._options = options
        self._navigation.year_range = options.resolve_year_range(self._today().year)
        if options.disabled and self.is_open:
            logger.debug("Picker disabled while open; closing")
            self._transition(SelectionState.CLOSED)

    # Events

    def activate_trigger(self) -> bool:
        """Toggle the picker. Opening anchors the view on the value or today."""
        if self._disposed:
            return False
        if self._state is SelectionState.CLOSED:
            if self._options.disabled:
                logger.debug("Trigger ignored: picker is disabled")
                return False
            self._navigation.anchor(self._value)
            self._transition(SelectionState.OPEN)
        else:
            self._transition(SelectionState.CLOSED)
        return True

    def escape(self) -> bool:
        """Close without changing the value."""
        return self._dismiss("escape")

    def outside_interaction(self) -> bool:
        """Close without changing the value."""
        return self._dismiss("outside interaction")

    def open_month_picker(self) -> bool:
        if self._state is not SelectionState.OPEN:
            return False
        self._transition(SelectionState.MONTH_PICKER_OPEN)
        return True

    def open_year_picker(self) -> bool:
        if self._state is not SelectionState.OPEN:
            return False
        self._transition(SelectionState.YEAR_PICKER_OPEN)
        return True

    def choose_month(self, month: int) -> bool:
        """Pick a zero-based month from the month picker."""
        if self._state is not SelectionState.MONTH_PICKER_OPEN:
            return False
        if not self._navigation.select_month(month):
            return False
        self._transition(SelectionState.OPEN)
        return True

    def choose_year(self, year: int) -> bool:
        """Pick a year from the year picker."""
        if self._state is not SelectionState.YEAR_PICKER_OPEN:
            return False
        if not self._navigation.select_year(year):
            return False
        self._transition(SelectionState.OPEN)
        return True

    def previous_month(self) -> bool:
        return self._step_month(-1)

    def next_month(self) -> bool:
        return self._step_month(1)

    def choose_day(self, candidate: Optional[str]) -> bool:
        """
        Commit a day cell.

        Returns:
            True if the date was committed; False if it was rejected, in
            which case state and value are unchanged
        """
        if self._state is not SelectionState.OPEN:
            return False
        return self._try_commit(candidate)

    def choose_today(self) -> bool:
        """Commit today's date regardless of the month being browsed."""
        if self._state is not SelectionState.OPEN or not self._options.show_today:
            return False
        return self._try_commit(date_model.today(self._clock))

    def clear(self) -> bool:
        """Commit an empty value."""
        if not self.is_open or not self.can_clear:
            return False
        self._commit("")
        return True

    def dispose(self) -> None:
        """Tear down: release listeners and ignore further events."""
        if self._disposed:
            return
        if self.is_open:
            self._transition(SelectionState.CLOSED)
        self._release_listeners()
        self._disposed = True
        logger.debug("Date picker state machine disposed")

    # Internals

    def _dismiss(self, cause: str) -> bool:
        if not self.is_open:
            return False
        logger.debug("Closing picker on %s", cause)
        self._transition(SelectionState.CLOSED)
        return True

    def _step_month(self, delta: int) -> bool:
        if self._state is not SelectionState.OPEN:
            return False
        before = self._navigation.view_month
        if self._navigation.step(delta) == before:
            logger.debug("Month step ignored at calendar limit: %s", before.label)
            return False
        return True

    def _try_commit(self, candidate: Optional[str]) -> bool:
        try:
            canonical = date_model.parse_strict(candidate)
            ensure_within_range(canonical, self._options.date_range)
        except InvalidDateError as exc:
            logger.debug("Selection rejected (%s): %s", RejectReason.INVALID_INPUT, exc)
            return False
        except OutOfRangeError as exc:
            logger.debug("Selection rejected (%s): %s", RejectReason.OUT_OF_RANGE, exc)
            return False

        self._commit(canonical)
        return True

    def _commit(self, next_value: str) -> None:
        self._transition(SelectionState.CLOSED)
        self._value = next_value
        logger.debug("Committing value %r", next_value)
        if self._on_change is not None:
            self._on_change(next_value)

    def _transition(self, new_state: SelectionState) -> None:
        previous = self._state
        self._state = new_state
        if new_state.is_open:
            self._acquire_listeners()
        else:
            self._release_listeners()
        if previous is not new_state:
            logger.debug("State %s -> %s", previous.value, new_state.value)

    def _acquire_listeners(self) -> None:
        if not self._listeners_held:
            self._listeners.acquire()
            self._listeners_held = True

    def _release_listeners(self) -> None:
        if self._listeners_held:
            self._listeners.release()
            self._listeners_held = False

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
Date picker widget.

A trigger button showing the selected date and a popup with a month grid,
month and year quick-pickers, and optional Today/Clear actions. All
behaviour lives in ``SelectionStateMachine``; this widget forwards UI events
to it and re-renders from its state.
"""

import logging
from typing import Callable, Dict, List, Optional

from core.date_picker.calendar_grid import weeks
from core.date_picker.constants import WEEKDAY_HEADERS, SelectionState
from core.date_picker.date_model import Clock
from core.date_picker.models import DatePickerOptions
from core.date_picker.state_machine import SelectionStateMachine
from ui.common.style_utils import set_widget_dynamic_property, set_widget_role
from ui.date_picker.interaction_filter import QtInteractionListeners
from ui.qt_imports import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QIcon,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPoint,
    QPushButton,
    QRect,
    QSizePolicy,
    QStackedWidget,
    Qt,
    QVBoxLayout,
    QWidget,
    Signal,
)

logger = logging.getLogger("datepick.ui.date_picker")

CALENDAR_ICON_THEME_NAME = "x-office-calendar"

_PAGE_FOR_STATE = {
    SelectionState.OPEN: 0,
    SelectionState.MONTH_PICKER_OPEN: 1,
    SelectionState.YEAR_PICKER_OPEN: 2,
}


class DatePickerWidget(QWidget):
    """
    Calendar date picker bound to a canonical ``YYYY-MM-DD`` value.
    """

    date_changed = Signal(str)  # canonical date or ''

    def __init__(
        self,
        value: str = "",
        options: Optional[DatePickerOptions] = None,
        on_change: Optional[Callable[[str], None]] = None,
        clock: Optional[Clock] = None,
        parent: Optional[QWidget] = None,
    ):
        """
        Initialize date picker widget.

        Args:
            value: Current canonical date or ''
            options: Picker configuration
            on_change: Called once per committed value
            clock: Source of today's date
            parent: Parent widget
        """
        super().__init__(parent)

        self._host_on_change = on_change
        self._rendered_state = SelectionState.CLOSED
        self.day_buttons: Dict[str, QPushButton] = {}
        self.month_buttons: List[QPushButton] = []

        self._listeners = QtInteractionListeners(
            self._contains_global_point,
            self._on_outside_interaction,
            self._on_escape_pressed,
            parent=self,
        )
        self.machine = SelectionStateMachine(
            value=value,
            on_change=self._emit_change,
            options=options,
            listeners=self._listeners,
            clock=clock,
        )

        self.setup_ui()
        self.refresh()

    # Setup

    def setup_ui(self):
        """Set up trigger, hint and popup."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.trigger_button = QPushButton()
        self.trigger_button.setObjectName("date_picker_trigger")
        self.trigger_button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        set_widget_role(self.trigger_button, "date-picker-trigger")
        self.trigger_button.clicked.connect(self._on_trigger_clicked)
        layout.addWidget(self.trigger_button)

        self.hint_label = QLabel()
        self.hint_label.setObjectName("date_picker_hint")
        self.hint_label.setWordWrap(True)
        layout.addWidget(self.hint_label)

        self._setup_popup()

    def _setup_popup(self):
        self.popup = QFrame(self, Qt.WindowType.Tool | Qt.WindowType.FramelessWindowHint)
        self.popup.setObjectName("date_picker_popup")
        self.popup.setFrameStyle(QFrame.Shape.StyledPanel)
        self.popup.hide()

        popup_layout = QVBoxLayout(self.popup)
        popup_layout.setContentsMargins(8, 8, 8, 8)
        popup_layout.setSpacing(6)

        # Header: previous, month, year, next
        header = QHBoxLayout()
        self.prev_btn = QPushButton("‹")
        self.month_btn = QPushButton()
        self.year_btn = QPushButton()
        self.next_btn = QPushButton("›")
        for button in (self.prev_btn, self.next_btn):
            set_widget_role(button, "date-picker-nav")
        for button in (self.month_btn, self.year_btn):
            set_widget_role(button, "date-picker-period")
        self.prev_btn.clicked.connect(self._on_prev_clicked)
        self.next_btn.clicked.connect(self._on_next_clicked)
        self.month_btn.clicked.connect(self._on_month_button_clicked)
        self.year_btn.clicked.connect(self._on_year_button_clicked)
        header.addWidget(self.prev_btn)
        header.addStretch()
        header.addWidget(self.month_btn)
        header.addWidget(self.year_btn)
        header.addStretch()
        header.addWidget(self.next_btn)
        popup_layout.addLayout(header)

        self.pages = QStackedWidget()
        self.pages.addWidget(self._create_day_page())
        self.pages.addWidget(self._create_month_page())
        self.pages.addWidget(self._create_year_page())
        popup_layout.addWidget(self.pages)

        footer = QHBoxLayout()
        self.today_btn = QPushButton("Today")
        self.clear_btn = QPushButton("Clear")
        set_widget_role(self.today_btn, "date-picker-action")
        set_widget_role(self.clear_btn, "date-picker-action")
        self.today_btn.clicked.connect(self._on_today_clicked)
        self.clear_btn.clicked.connect(self._on_clear_clicked)
        footer.addWidget(self.today_btn)
        footer.addStretch()
        footer.addWidget(self.clear_btn)
        popup_layout.addLayout(footer)

    def _create_day_page(self) -> QWidget:
        page = QWidget()
        self.day_grid = QGridLayout(page)
        self.day_grid.setSpacing(2)
        self.day_grid.setContentsMargins(0, 0, 0, 0)

        for column, name in enumerate(WEEKDAY_HEADERS):
            header = QLabel(name)
            header.setAlignment(Qt.AlignmentFlag.AlignCenter)
            set_widget_role(header, "date-picker-weekday")
            self.day_grid.addWidget(header, 0, column)

        self._day_cell_widgets: List[QWidget] = []
        return page

    def _create_month_page(self) -> QWidget:
        page = QWidget()
        grid = QGridLayout(page)
        grid.setSpacing(4)
        grid.setContentsMargins(0, 0, 0, 0)

        for index, name in enumerate(self.machine.navigation.month_names()):
            button = QPushButton(name[:3])
            button.setToolTip(name)
            set_widget_role(button, "date-picker-month")
            button.clicked.connect(lambda _checked=False, m=index: self._on_month_chosen(m))
            grid.addWidget(button, index // 3, index % 3)
            self.month_buttons.append(button)
        return page

    def _create_year_page(self) -> QWidget:
        self.year_list = QListWidget()
        self.year_list.setObjectName("date_picker_years")
        self.year_list.itemClicked.connect(self._on_year_item_clicked)
        self._populate_years()
        return self.year_list

    def _populate_years(self):
        self.year_list.clear()
        for year in self.machine.navigation.year_options():
            item = QListWidgetItem(str(year))
            item.setData(Qt.ItemDataRole.UserRole, year)
            self.year_list.addItem(item)

    # Host API

    @property
    def value(self) -> str:
        return self.machine.value

    def set_value(self, value: str):
        """Replace the value from the host without emitting ``date_changed``."""
        self.machine.set_value(value)
        self.refresh()

    def set_options(self, options: DatePickerOptions):
        self.machine.set_options(options)
        self._populate_years()
        self.refresh()

    # Rendering

    def refresh(self):
        """Re-render every part of the widget from the state machine."""
        machine = self.machine
        options = machine.options

        self.trigger_button.setText(machine.trigger_text)
        self.trigger_button.setEnabled(not options.disabled)
        self.trigger_button.setIcon(
            QIcon.fromTheme(CALENDAR_ICON_THEME_NAME) if options.with_icon else QIcon()
        )
        set_widget_dynamic_property(self.trigger_button, "error", bool(options.error))
        set_widget_dynamic_property(self.trigger_button, "empty", not machine.has_value)

        self.hint_label.setText(options.hint)
        self.hint_label.setVisible(bool(options.hint))
        set_widget_dynamic_property(self.hint_label, "error", bool(options.error))

        state = machine.state
        if state.is_open:
            self._render_popup(state)
            if self.popup.isHidden():
                self._show_popup()
        elif not self.popup.isHidden():
            self.popup.hide()

        self._rendered_state = state

    def _render_popup(self, state: SelectionState):
        view_month = self.machine.view_month
        month_name = self.machine.navigation.month_names()[view_month.month]
        self.month_btn.setText(month_name)
        self.year_btn.setText(str(view_month.year))

        is_day_page = state is SelectionState.OPEN
        self.prev_btn.setEnabled(is_day_page)
        self.next_btn.setEnabled(is_day_page)
        self.pages.setCurrentIndex(_PAGE_FOR_STATE[state])

        self._render_days()
        self._render_months()
        if state is SelectionState.YEAR_PICKER_OPEN:
            self._render_years(scroll=self._rendered_state is not state)

        self.today_btn.setVisible(self.machine.can_show_today)
        self.clear_btn.setVisible(self.machine.options.show_clear)
        self.clear_btn.setEnabled(self.machine.can_clear)

    def _render_days(self):
        for widget in self._day_cell_widgets:
            self.day_grid.removeWidget(widget)
            widget.deleteLater()
        self._day_cell_widgets = []
        self.day_buttons = {}

        for row, week in enumerate(weeks(self.machine.grid()), start=1):
            for column, cell in enumerate(week):
                if cell.is_blank:
                    widget = QLabel("")
                else:
                    widget = self._create_day_button(cell.date, cell.day)
                    self.day_buttons[cell.date] = widget
                self.day_grid.addWidget(widget, row, column)
                self._day_cell_widgets.append(widget)

    def _create_day_button(self, canonical: str, day: int) -> QPushButton:
        button = QPushButton(str(day))
        set_widget_role(button, "date-picker-day")
        button.setEnabled(self.machine.is_selectable(canonical))
        button.setProperty("selected", self.machine.is_selected(canonical))
        button.setProperty("today", self.machine.is_today(canonical))
        button.clicked.connect(lambda _checked=False, d=canonical: self._on_day_chosen(d))
        return button

    def _render_months(self):
        current = self.machine.view_month.month
        for index, button in enumerate(self.month_buttons):
            set_widget_dynamic_property(button, "selected", index == current)

    def _render_years(self, scroll: bool):
        year = self.machine.view_month.year
        for row in range(self.year_list.count()):
            item = self.year_list.item(row)
            if item.data(Qt.ItemDataRole.UserRole) == year:
                self.year_list.setCurrentRow(row)
                break

        if scroll:
            offset = self.machine.navigation.year_scroll_offset(
                self.machine.options.year_row_height
            )
            scroll_bar = self.year_list.verticalScrollBar()
            scroll_bar.setValue(min(offset, scroll_bar.maximum()))

    def _show_popup(self):
        anchor = self.trigger_button.mapToGlobal(QPoint(0, self.trigger_button.height()))
        self.popup.move(anchor)
        self.popup.show()
        self.popup.raise_()

    def _contains_global_point(self, point: QPoint) -> bool:
        trigger_rect = QRect(
            self.trigger_button.mapToGlobal(QPoint(0, 0)), self.trigger_button.size()
        )
        if trigger_rect.contains(point):
            return True
        return not self.popup.isHidden() and self.popup.frameGeometry().contains(point)

    # Event handlers

    def _emit_change(self, value: str):
        if self._host_on_change is not None:
            self._host_on_change(value)
        self.date_changed.emit(value)

    def _dispatch(self, handler: Callable[[], bool]) -> bool:
        accepted = handler()
        self.refresh()
        return accepted

    def _on_trigger_clicked(self):
        self._dispatch(self.machine.activate_trigger)

    def _on_outside_interaction(self):
        self._dispatch(self.machine.outside_interaction)

    def _on_escape_pressed(self):
        self._dispatch(self.machine.escape)

    def _on_prev_clicked(self):
        self._dispatch(self.machine.previous_month)

    def _on_next_clicked(self):
        self._dispatch(self.machine.next_month)

    def _on_month_button_clicked(self):
        self._dispatch(self.machine.open_month_picker)

    def _on_year_button_clicked(self):
        self._dispatch(self.machine.open_year_picker)

    def _on_month_chosen(self, month: int):
        self._dispatch(lambda: self.machine.choose_month(month))

    def _on_year_item_clicked(self, item: QListWidgetItem):
        year = item.data(Qt.ItemDataRole.UserRole)
        self._dispatch(lambda: self.machine.choose_year(year))

    def _on_day_chosen(self, canonical: str):
        self._dispatch(lambda: self.machine.choose_day(canonical))

    def _on_today_clicked(self):
        self._dispatch(self.machine.choose_today)

    def _on_clear_clicked(self):
        self._dispatch(self.machine.clear)

    # Lifecycle

    def hideEvent(self, event):
        """Close the popup when the picker itself is hidden."""
        if self.machine.is_open:
            self._dispatch(self.machine.escape)
        super().hideEvent(event)

    def closeEvent(self, event):
        self.cleanup()
        super().closeEvent(event)

    def cleanup(self):
        """Release listeners and stop reacting to events."""
        self.machine.dispose()
        self.popup.hide()
        logger.debug("Date picker cleaned up")

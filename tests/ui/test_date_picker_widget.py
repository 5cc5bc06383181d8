# SPDX-License-Identifier: Apache-2.0
"""UI tests for the date picker widget."""

from unittest.mock import Mock

import pytest
from PySide6.QtCore import QEvent, QPoint, QPointF, Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent

from core.date_picker.constants import SelectionState
from core.date_picker.models import DatePickerOptions, ViewMonth, YearRange
from ui.date_picker.widget import DatePickerWidget

pytestmark = pytest.mark.ui


def _widget(fixed_today, value="", on_change=None, **option_values):
    return DatePickerWidget(
        value=value,
        options=DatePickerOptions(**option_values),
        on_change=on_change,
        clock=fixed_today,
    )


def test_trigger_shows_placeholder_or_display_value(qapp, fixed_today):
    empty = _widget(fixed_today, placeholder="Select date")
    assert empty.trigger_button.text() == "Select date"
    assert empty.trigger_button.property("empty") is True

    filled = _widget(fixed_today, value="2024-02-09")
    assert filled.trigger_button.text() == "09/02/2024"


def test_trigger_click_opens_popup_and_installs_listeners(qapp, fixed_today):
    widget = _widget(fixed_today)

    widget.trigger_button.click()

    assert widget.machine.state is SelectionState.OPEN
    assert not widget.popup.isHidden()
    assert widget._listeners.installed
    assert widget.month_btn.text() == "June"
    assert widget.year_btn.text() == "2024"
    assert "2024-06-30" in widget.day_buttons

    widget.trigger_button.click()

    assert widget.machine.state is SelectionState.CLOSED
    assert widget.popup.isHidden()
    assert not widget._listeners.installed
    widget.cleanup()


def test_day_click_commits_through_callback_and_signal(qapp, fixed_today):
    on_change = Mock()
    received = []
    widget = _widget(fixed_today, on_change=on_change)
    widget.date_changed.connect(received.append)

    widget.trigger_button.click()
    widget.day_buttons["2024-06-20"].click()

    on_change.assert_called_once_with("2024-06-20")
    assert received == ["2024-06-20"]
    assert widget.trigger_button.text() == "20/06/2024"
    assert widget.popup.isHidden()


def test_out_of_range_days_render_disabled(qapp, fixed_today):
    widget = _widget(fixed_today, min="2024-06-10", max="2024-06-20")
    widget.trigger_button.click()

    assert not widget.day_buttons["2024-06-09"].isEnabled()
    assert widget.day_buttons["2024-06-10"].isEnabled()
    assert not widget.day_buttons["2024-06-21"].isEnabled()
    widget.cleanup()


def test_navigation_buttons_step_months(qapp, fixed_today):
    widget = _widget(fixed_today, value="2024-12-05")
    widget.trigger_button.click()

    widget.next_btn.click()

    assert widget.machine.view_month == ViewMonth(2025, 0)
    assert widget.month_btn.text() == "January"
    assert widget.year_btn.text() == "2025"

    widget.prev_btn.click()
    widget.prev_btn.click()
    assert widget.machine.view_month == ViewMonth(2024, 10)
    widget.cleanup()


def test_month_picker_page_selects_month(qapp, fixed_today):
    widget = _widget(fixed_today)
    widget.trigger_button.click()

    widget.month_btn.click()
    assert widget.machine.state is SelectionState.MONTH_PICKER_OPEN
    assert widget.pages.currentIndex() == 1

    widget.month_buttons[1].click()

    assert widget.machine.state is SelectionState.OPEN
    assert widget.pages.currentIndex() == 0
    assert widget.machine.view_month == ViewMonth(2024, 1)
    assert "2024-02-29" in widget.day_buttons
    widget.cleanup()


def test_year_picker_lists_configured_years(qapp, fixed_today):
    widget = _widget(fixed_today, year_range=YearRange(1944, 2024))
    widget.trigger_button.click()
    widget.year_btn.click()

    assert widget.machine.state is SelectionState.YEAR_PICKER_OPEN
    assert widget.pages.currentIndex() == 2
    assert widget.year_list.count() == 81
    assert widget.year_list.item(0).text() == "2024"
    assert widget.year_list.currentItem().text() == "2024"

    item = widget.year_list.findItems("1990", Qt.MatchFlag.MatchExactly)[0]
    widget._on_year_item_clicked(item)

    assert widget.machine.state is SelectionState.OPEN
    assert widget.machine.view_month == ViewMonth(1990, 5)
    widget.cleanup()


def test_today_and_clear_actions(qapp, fixed_today):
    on_change = Mock()
    widget = _widget(
        fixed_today, value="2020-01-01", on_change=on_change, show_today=True, show_clear=True
    )
    widget.trigger_button.click()
    assert widget.clear_btn.isEnabled()

    widget.today_btn.click()
    on_change.assert_called_once_with("2024-06-15")

    widget.trigger_button.click()
    widget.clear_btn.click()

    assert on_change.call_args_list[-1].args == ("",)
    assert widget.value == ""
    assert widget.trigger_button.text() == "Select date"


def test_disabled_widget_does_not_open(qapp, fixed_today):
    widget = _widget(fixed_today, disabled=True)

    assert not widget.trigger_button.isEnabled()
    widget._on_trigger_clicked()

    assert widget.machine.state is SelectionState.CLOSED
    assert widget.popup.isHidden()


def test_hint_and_error_properties(qapp, fixed_today):
    widget = _widget(fixed_today, hint="Saved as YYYY-MM-DD", error=True)

    assert widget.hint_label.text() == "Saved as YYYY-MM-DD"
    assert widget.trigger_button.property("error") is True


def test_escape_key_closes_open_picker(qapp, fixed_today):
    widget = _widget(fixed_today)
    widget.trigger_button.click()
    event = QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Escape, Qt.KeyboardModifier.NoModifier)

    handled = widget._listeners.event_filter.eventFilter(widget, event)

    assert handled
    assert widget.machine.state is SelectionState.CLOSED
    assert not widget._listeners.installed


def test_outside_press_closes_open_picker(qapp, fixed_today):
    on_change = Mock()
    widget = _widget(fixed_today, on_change=on_change)
    widget.trigger_button.click()
    far_away = QPointF(-10000, -10000)
    event = QMouseEvent(
        QEvent.Type.MouseButtonPress,
        far_away,
        far_away,
        Qt.MouseButton.LeftButton,
        Qt.MouseButton.LeftButton,
        Qt.KeyboardModifier.NoModifier,
    )

    handled = widget._listeners.event_filter.eventFilter(widget, event)

    assert not handled
    assert widget.machine.state is SelectionState.CLOSED
    on_change.assert_not_called()


def test_press_on_trigger_is_not_outside(qapp, fixed_today):
    widget = _widget(fixed_today)
    widget.trigger_button.click()

    inside = widget.trigger_button.mapToGlobal(QPoint(1, 1))
    assert widget._contains_global_point(inside)
    widget.cleanup()


def test_set_value_updates_without_signal(qapp, fixed_today):
    received = []
    widget = _widget(fixed_today)
    widget.date_changed.connect(received.append)

    widget.set_value("2024-03-03")

    assert widget.trigger_button.text() == "03/03/2024"
    assert received == []


def test_cleanup_releases_listeners(qapp, fixed_today):
    widget = _widget(fixed_today)
    widget.trigger_button.click()

    widget.cleanup()

    assert not widget._listeners.installed
    assert widget.popup.isHidden()
    widget.trigger_button.click()
    assert widget.machine.state is SelectionState.CLOSED

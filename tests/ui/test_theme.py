# SPDX-License-Identifier: Apache-2.0
"""UI tests for theme stylesheets."""

import pytest

from config.constants import THEMES
from core.date_picker.models import DatePickerOptions
from ui.common.theme import apply_theme, get_theme_path, load_stylesheet
from ui.date_picker.widget import DatePickerWidget

pytestmark = pytest.mark.ui


@pytest.fixture
def restore_stylesheet(qapp):
    previous = qapp.styleSheet()
    yield
    qapp.setStyleSheet(previous)


@pytest.mark.parametrize("theme", THEMES)
def test_theme_styles_picker_state_properties(theme):
    assert get_theme_path(theme).is_file()

    stylesheet = load_stylesheet(theme)

    assert 'QPushButton[role="date-picker-trigger"][error="true"]' in stylesheet
    assert 'QPushButton[role="date-picker-trigger"][empty="true"]' in stylesheet
    assert 'QLabel#date_picker_hint[error="true"]' in stylesheet
    assert 'QPushButton[role="date-picker-day"][selected="true"]' in stylesheet
    assert 'QPushButton[role="date-picker-day"][today="true"]' in stylesheet


def test_unknown_theme_is_rejected():
    with pytest.raises(ValueError):
        load_stylesheet("sepia")


def test_apply_theme_sets_application_stylesheet(qapp, restore_stylesheet):
    assert apply_theme(qapp, "dark") == "dark"
    assert qapp.styleSheet() == load_stylesheet("dark")


def test_system_theme_resolves_to_a_shipped_theme(qapp, restore_stylesheet):
    applied = apply_theme(qapp, "system")

    assert applied in THEMES
    assert qapp.styleSheet() == load_stylesheet(applied)


def test_error_option_is_exposed_to_stylesheet(qapp, fixed_today, restore_stylesheet):
    apply_theme(qapp, "light")
    widget = DatePickerWidget(
        options=DatePickerOptions(error=True, hint="Required"), clock=fixed_today
    )

    assert widget.trigger_button.property("error") is True
    assert widget.hint_label.property("error") is True
    assert widget.trigger_button.property("role") == "date-picker-trigger"

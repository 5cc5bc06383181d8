"""Common UI helpers for DatePick."""

from ui.common.style_utils import (
    refresh_widget_style,
    set_widget_dynamic_property,
    set_widget_role,
)
from ui.common.theme import apply_theme, get_theme_path, load_stylesheet

__all__ = [
    'apply_theme',
    'get_theme_path',
    'load_stylesheet',
    'refresh_widget_style',
    'set_widget_dynamic_property',
    'set_widget_role'
]

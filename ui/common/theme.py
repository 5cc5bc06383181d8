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
Theme stylesheets.

Widgets only publish ``role`` and state properties (``error``, ``empty``,
``selected``, ``today``); the ``.qss`` files under ``ui/resources/themes``
turn them into colours.
"""

import logging
from pathlib import Path

from config.constants import DEFAULT_THEME, SYSTEM_THEME, THEMES
from ui.qt_imports import QApplication

logger = logging.getLogger("datepick.ui.theme")

THEMES_DIR = Path(__file__).parent.parent / "resources" / "themes"


def get_theme_path(theme: str) -> Path:
    """Path of the stylesheet for a concrete theme name."""
    return THEMES_DIR / f"{theme}.qss"


def detect_system_theme(app: QApplication) -> str:
    """
    Guess the platform theme from the application palette.

    Returns:
        'dark' when window text is brighter than the window background,
        otherwise 'light'
    """
    palette = app.palette()
    window_color = palette.color(palette.ColorRole.Window)
    text_color = palette.color(palette.ColorRole.WindowText)
    if window_color.lightness() < text_color.lightness():
        return "dark"
    return "light"


def load_stylesheet(theme: str) -> str:
    """
    Read a theme stylesheet.

    Raises:
        ValueError: If ``theme`` is not a known theme
        FileNotFoundError: If the stylesheet is missing
    """
    if theme not in THEMES:
        raise ValueError(f"Unknown theme {theme!r}; expected one of {THEMES}")
    with open(get_theme_path(theme), "r", encoding="utf-8") as f:
        return f.read()


def apply_theme(app: QApplication, theme: str = DEFAULT_THEME) -> str:
    """
    Apply a theme stylesheet to the whole application.

    Args:
        app: Running application
        theme: 'light', 'dark' or 'system'

    Returns:
        Name of the theme that was applied
    """
    if theme == SYSTEM_THEME:
        theme = detect_system_theme(app)

    try:
        stylesheet = load_stylesheet(theme)
    except FileNotFoundError:
        logger.warning(f"Theme file not found: {get_theme_path(theme)}")
        stylesheet = ""

    app.setStyleSheet(stylesheet)
    logger.debug(f"Applied theme: {theme}")
    return theme

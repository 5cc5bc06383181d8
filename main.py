#!/usr/bin/env python3
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
DatePick - calendar date picker demo

Main entry point for the application.
"""

import sys
import traceback

from config.app_config import ConfigManager
from config.constants import APP_NAME, DEFAULT_THEME, LOG_SEPARATOR_LENGTH
from utils.logger import setup_logging

# Global logger for exception hook
_logger = None


def exception_hook(exctype, value, tb):
    """
    Global exception handler for uncaught exceptions.

    Args:
        exctype: Exception type
        value: Exception value
        tb: Traceback object
    """
    error_msg = "".join(traceback.format_exception(exctype, value, tb))

    if _logger:
        _logger.critical(
            f"Uncaught exception: {exctype.__name__}: {value}",
            exc_info=(exctype, value, tb),
        )
    else:
        print(f"CRITICAL ERROR: {error_msg}", file=sys.stderr)


def create_main_window(config: ConfigManager):
    """Build the demo window hosting a configured date picker."""
    from config.__version__ import get_display_version
    from core.date_picker.models import DatePickerOptions
    from ui.date_picker.widget import DatePickerWidget
    from ui.qt_imports import QLabel, QMainWindow, QVBoxLayout, QWidget

    window = QMainWindow()
    window.setWindowTitle(f"{APP_NAME} {get_display_version()}")
    window.resize(config.get("ui.window_width", 360), config.get("ui.window_height", 420))

    central = QWidget()
    layout = QVBoxLayout(central)

    selection_label = QLabel("No date selected")
    options = DatePickerOptions.from_config(config, hint="Saved as YYYY-MM-DD")
    picker = DatePickerWidget(options=options)

    def on_date_changed(value: str):
        selection_label.setText(f"Selected: {value}" if value else "No date selected")
        if _logger:
            _logger.info("Date changed to %r", value)

    picker.date_changed.connect(on_date_changed)

    layout.addWidget(picker)
    layout.addWidget(selection_label)
    layout.addStretch()
    window.setCentralWidget(central)
    return window


def main():
    """Application entry point."""
    global _logger

    logger = setup_logging()
    _logger = logger

    logger.info("=" * LOG_SEPARATOR_LENGTH)
    logger.info(f"{APP_NAME} Starting")
    logger.info("=" * LOG_SEPARATOR_LENGTH)

    sys.excepthook = exception_hook
    logger.info("Global exception handler installed")

    from ui.qt_imports import QApplication

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)

    logger.info("Loading configuration...")
    config = ConfigManager()
    logger.info("Configuration loaded (version: %s)", config.get("version", "unknown"))

    from ui.common.theme import apply_theme

    theme = apply_theme(app, config.get("ui.theme", DEFAULT_THEME))
    logger.info("Theme applied: %s", theme)

    window = create_main_window(config)
    window.show()

    exit_code = app.exec()
    logger.info(f"{APP_NAME} exiting with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())

# SPDX-License-Identifier: Apache-2.0
"""
Pytest configuration for DatePick tests.
"""

import os
import sys
from datetime import date

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for PySide6 testing."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture
def fixed_today():
    """Clock pinned to 2024-06-15."""
    return lambda: date(2024, 6, 15)

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
Centralized PySide6 imports for the UI layer.

This module provides a single location for the PySide6 classes used by the
date picker widgets, keeping import patterns consistent across the UI layer.
"""

# Core Qt classes
from PySide6.QtCore import (
    QEvent,
    QObject,
    QPoint,
    QRect,
    Qt,
    Signal,
)

# GUI classes
from PySide6.QtGui import (
    QIcon,
    QKeyEvent,
    QMouseEvent,
)

# Widget classes
from PySide6.QtWidgets import (
    QApplication,
    QWidget,
    QMainWindow,
    # Layout classes
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    # Container widgets
    QFrame,
    QStackedWidget,
    # Input widgets
    QPushButton,
    # Display widgets
    QLabel,
    # Item widgets
    QListWidget,
    QListWidgetItem,
    # Spacers
    QSizePolicy,
)

__all__ = [
    # Core
    "QApplication",
    "QWidget",
    "QMainWindow",
    "QObject",
    "QEvent",
    "Qt",
    "Signal",
    # Layouts
    "QVBoxLayout",
    "QHBoxLayout",
    "QGridLayout",
    # Common widgets
    "QLabel",
    "QPushButton",
    "QListWidget",
    "QListWidgetItem",
    # Containers
    "QFrame",
    "QStackedWidget",
    # Events
    "QKeyEvent",
    "QMouseEvent",
    # Graphics and styling
    "QIcon",
    "QSizePolicy",
    # Utility
    "QPoint",
    "QRect",
]

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
Outside-click and Escape listeners for an open date picker.

An application-wide event filter is installed only while the picker is
open, so a closed picker costs nothing and cannot leak a subscription.
"""

import logging
from typing import Callable, Optional

from core.date_picker.listeners import InteractionListeners
from ui.qt_imports import QApplication, QEvent, QObject, QPoint, Qt

logger = logging.getLogger("datepick.ui.interaction_filter")


class PopupEventFilter(QObject):
    """Reports mouse presses outside the picker and Escape key presses."""

    def __init__(
        self,
        contains: Callable[[QPoint], bool],
        on_outside: Callable[[], None],
        on_escape: Callable[[], None],
        parent: Optional[QObject] = None,
    ):
        """
        Initialize the filter.

        Args:
            contains: Returns True when a global point lies on the picker
            on_outside: Called for a mouse press outside the picker
            on_escape: Called when Escape is pressed
            parent: Parent object
        """
        super().__init__(parent)
        self._contains = contains
        self._on_outside = on_outside
        self._on_escape = on_escape

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        event_type = event.type()

        if event_type == QEvent.Type.MouseButtonPress:
            point = event.globalPosition().toPoint()
            if not self._contains(point):
                self._on_outside()
            return False

        if event_type == QEvent.Type.KeyPress and event.key() == Qt.Key.Key_Escape:
            self._on_escape()
            return True

        return False


class QtInteractionListeners(InteractionListeners):
    """Installs a ``PopupEventFilter`` on the application while acquired."""

    def __init__(
        self,
        contains: Callable[[QPoint], bool],
        on_outside: Callable[[], None],
        on_escape: Callable[[], None],
        parent: Optional[QObject] = None,
    ):
        self._filter = PopupEventFilter(contains, on_outside, on_escape, parent)
        self._installed = False

    @property
    def event_filter(self) -> PopupEventFilter:
        return self._filter

    @property
    def installed(self) -> bool:
        return self._installed

    def acquire(self) -> None:
        if self._installed:
            return
        app = QApplication.instance()
        if app is None:
            logger.warning("No QApplication instance; picker listeners not installed")
            return
        app.installEventFilter(self._filter)
        self._installed = True
        logger.debug("Picker listeners installed")

    def release(self) -> None:
        if not self._installed:
            return
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self._filter)
        self._installed = False
        logger.debug("Picker listeners removed")

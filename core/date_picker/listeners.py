# SPDX-License-Identifier: Apache-2.0
"""
Scoped interaction listeners.

While a picker is open it listens for clicks outside of it and for the
Escape key. The selection state machine acquires these listeners when it
leaves the closed state and releases them when it returns to it.
"""

from abc import ABC, abstractmethod


class InteractionListeners(ABC):
    """Outside-interaction and Escape subscriptions held while a picker is open."""

    @abstractmethod
    def acquire(self) -> None:
        """Start delivering outside-interaction and Escape events."""
        pass

    @abstractmethod
    def release(self) -> None:
        """Stop delivering events. Must be safe to call more than once."""
        pass


class NullInteractionListeners(InteractionListeners):
    """Listeners for contexts without an event source, such as tests."""

    def __init__(self):
        self.active = False

    def acquire(self) -> None:
        self.active = True

    def release(self) -> None:
        self.active = False

# SPDX-License-Identifier: Apache-2.0
"""
Exceptions for the date picker.

Both errors are recovered inside the engine; they never reach the host.
"""

from typing import Optional


class DatePickerError(Exception):
    """Base exception for date picker operations."""

    pass


class InvalidDateError(DatePickerError):
    """Raised when text is not a real calendar date in YYYY-MM-DD form."""

    def __init__(self, text: Optional[str], reason: str = "malformed date"):
        super().__init__(f"Invalid date {text!r}: {reason}")
        self.text = text
        self.reason = reason


class OutOfRangeError(DatePickerError):
    """Raised when a valid date falls outside the selectable bounds."""

    def __init__(
        self,
        candidate: str,
        minimum: Optional[str] = None,
        maximum: Optional[str] = None,
    ):
        super().__init__(
            f"Date {candidate} outside range [{minimum or '-'}, {maximum or '-'}]"
        )
        self.candidate = candidate
        self.minimum = minimum
        self.maximum = maximum

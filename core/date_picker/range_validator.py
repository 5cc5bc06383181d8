# SPDX-License-Identifier: Apache-2.0
"""
Selectable-range checks.

Canonical dates sort lexicographically in calendar order, so containment is
a plain string comparison.
"""

from typing import Optional

from core.date_picker import date_model
from core.date_picker.exceptions import OutOfRangeError
from core.date_picker.models import DateRange


def within_range(candidate: str, date_range: Optional[DateRange]) -> bool:
    """Return True unless ``candidate`` is before ``min`` or after ``max``."""
    if date_range is None:
        return True
    if date_range.min and candidate < date_range.min:
        return False
    if date_range.max and candidate > date_range.max:
        return False
    return True


def ensure_within_range(candidate: str, date_range: Optional[DateRange]) -> str:
    """
    Return ``candidate`` when it lies inside the range.

    Raises:
        OutOfRangeError: If the date falls outside the bounds
    """
    if not within_range(candidate, date_range):
        raise OutOfRangeError(
            candidate,
            date_range.min if date_range else None,
            date_range.max if date_range else None,
        )
    return candidate


def is_selectable(candidate: Optional[str], date_range: Optional[DateRange]) -> bool:
    """True when ``candidate`` is a real date inside the range."""
    canonical = date_model.parse(candidate)
    if canonical is None:
        return False
    return within_range(canonical, date_range)

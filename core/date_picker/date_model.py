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
Canonical date text handling.

Dates cross the picker boundary as ``YYYY-MM-DD`` strings. This module is the
only place that turns text into dates and back; everything it returns is a
real calendar day.
"""

import logging
from datetime import date
from typing import Callable, Optional, Tuple, Union

from core.date_picker.constants import CANONICAL_SEPARATOR, DISPLAY_SEPARATOR
from core.date_picker.exceptions import InvalidDateError

logger = logging.getLogger("datepick.core.date_model")

Clock = Callable[[], date]
DateLike = Union[date, Tuple[int, int, int]]


def _digits(part: str) -> bool:
    return bool(part) and part.isascii() and part.isdigit()


def parse_strict(text: Optional[str]) -> str:
    """
    Parse ``YYYY-MM-DD`` text into a canonical date string.

    Args:
        text: Candidate date text

    Returns:
        The canonical form of the date

    Raises:
        InvalidDateError: If the text is empty, malformed, or names a day
            that does not exist (e.g. 2023-02-29)
    """
    if text is None:
        raise InvalidDateError(text, "empty value")

    stripped = text.strip()
    if not stripped:
        raise InvalidDateError(text, "empty value")

    parts = stripped.split(CANONICAL_SEPARATOR)
    if len(parts) != 3:
        raise InvalidDateError(text, "expected three dash-separated groups")

    year_text, month_text, day_text = parts
    if not all(_digits(p) for p in parts):
        raise InvalidDateError(text, "non-numeric group")
    if len(year_text) != 4 or len(month_text) > 2 or len(day_text) > 2:
        raise InvalidDateError(text, "unexpected group width")

    year, month, day = int(year_text), int(month_text), int(day_text)
    try:
        built = date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(text, str(exc)) from exc

    # Reject anything a lenient calendar would have rolled over
    if (built.year, built.month, built.day) != (year, month, day):
        raise InvalidDateError(text, "day does not exist in month")

    return format_date(built)


def parse(text: Optional[str]) -> Optional[str]:
    """Parse date text, returning None instead of raising on bad input."""
    try:
        return parse_strict(text)
    except InvalidDateError as exc:
        if text:
            logger.debug("Ignoring invalid date text: %s", exc)
        return None


def format_date(value: DateLike) -> str:
    """
    Serialize a date to ``YYYY-MM-DD``.

    Args:
        value: A ``datetime.date`` or a ``(year, month, day)`` triple with a
            1-based month

    Returns:
        Canonical date string with zero-padded month and day
    """
    if isinstance(value, date):
        year, month, day = value.year, value.month, value.day
    else:
        year, month, day = value
    return f"{year:04d}{CANONICAL_SEPARATOR}{month:02d}{CANONICAL_SEPARATOR}{day:02d}"


def to_date(value: Optional[str]) -> Optional[date]:
    """Convert canonical date text to a ``datetime.date``."""
    canonical = parse(value)
    if canonical is None:
        return None
    year, month, day = (int(p) for p in canonical.split(CANONICAL_SEPARATOR))
    return date(year, month, day)


def display(value: Optional[str]) -> str:
    """Return the ``dd/mm/yyyy`` presentation of a canonical date, or ''."""
    parsed = to_date(value)
    if parsed is None:
        return ""
    return DISPLAY_SEPARATOR.join(
        (f"{parsed.day:02d}", f"{parsed.month:02d}", f"{parsed.year:04d}")
    )


def today(clock: Optional[Clock] = None) -> str:
    """Return today's canonical date, read from ``clock`` when given."""
    current = clock() if clock is not None else date.today()
    return format_date(current)

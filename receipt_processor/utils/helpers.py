"""Miscellaneous helper functions.

The parsers here are deliberately forgiving: they return ``None`` for
anything they cannot understand so callers can treat a malformed field
as "not applicable" instead of handling exceptions.
"""

from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal
from typing import Optional

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIME_RE = re.compile(r"\d{2}:\d{2}")
_AMOUNT_RE = re.compile(r"[0-9]+(\.[0-9]+)?")


def parse_amount(value: str | None) -> Optional[Decimal]:
    """Parse a monetary amount such as ``"6.49"`` into a :class:`Decimal`.

    Only plain digits with an optional fractional part are accepted, so
    signs, exponents, underscores, padding, NaN and infinities all give
    ``None``.
    """
    if not value or not _AMOUNT_RE.fullmatch(value):
        return None
    return Decimal(value)


def parse_purchase_date(value: str | None) -> Optional[dt.date]:
    """Parse a ``YYYY-MM-DD`` calendar date, or return ``None``."""
    if not value or not _DATE_RE.fullmatch(value):
        return None
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        return None


def parse_purchase_time(value: str | None) -> Optional[dt.time]:
    """Parse a 24-hour ``HH:MM`` time, or return ``None``."""
    if not value or not _TIME_RE.fullmatch(value):
        return None
    try:
        return dt.datetime.strptime(value, "%H:%M").time()
    except ValueError:
        return None

"""Value wrappers for the string-typed receipt fields.

Receipts arrive with currency, dates and times as strings, and some
scoring rules care about the literal text (a total ending in ``.00``)
while others need the parsed value. Each wrapper keeps the original
string in ``raw`` and parses it lazily into ``value`` on first access.
``value`` is ``None`` when the string cannot be parsed.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from functools import cached_property
from typing import Optional

from receipt_processor.utils.helpers import parse_amount, parse_purchase_date, parse_purchase_time


class _RawValue:
    def __init__(self, raw: str) -> None:
        self.raw = raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw!r})"

    def __str__(self) -> str:
        return self.raw


class Amount(_RawValue):
    """A two-decimal currency string such as ``"35.35"``."""

    @cached_property
    def value(self) -> Optional[Decimal]:
        return parse_amount(self.raw)

    @property
    def has_no_cents(self) -> bool:
        """True when the text itself ends in ``.00`` ("10.0" does not count)."""
        return self.raw.endswith(".00")


class PurchaseDate(_RawValue):
    """A ``YYYY-MM-DD`` purchase date."""

    @cached_property
    def value(self) -> Optional[dt.date]:
        return parse_purchase_date(self.raw)


class PurchaseTime(_RawValue):
    """A 24-hour ``HH:MM`` purchase time."""

    @cached_property
    def value(self) -> Optional[dt.time]:
        return parse_purchase_time(self.raw)

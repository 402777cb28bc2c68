"""Reward points engine for submitted receipts.

The engine maps a :class:`~receipt_processor.models.schemas.Receipt` to
an integer score. The score is the sum of seven independent rules; each
rule reads one or more receipt fields and returns a non-negative number
of points:

* ``retailer_name`` – one point for every ASCII letter or digit in the
  retailer name.
* ``round_dollar_total`` – 50 points if the total text ends in ``.00``.
* ``quarter_multiple_total`` – 25 points if the total is a multiple of
  ``0.25``.
* ``item_pairs`` – 5 points for every two items on the receipt.
* ``item_descriptions`` – for each item whose trimmed description length
  is a multiple of 3, the price multiplied by ``0.2`` and rounded up.
* ``odd_purchase_day`` – 6 points if the day in the purchase date is odd.
* ``afternoon_purchase`` – 10 points if the purchase time is from
  14:00 up to but not including 16:00.

A field that cannot be parsed simply contributes nothing to the rule
that needed it, so scoring never raises. The engine holds no state and
never touches storage; it is safe to call concurrently.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, Tuple

from receipt_processor.models.schemas import Item, Receipt

RETAILER_CHAR_POINTS = 1
ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
QUARTER = Decimal("0.25")
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_DIVISOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16

_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")


def _retailer_name(receipt: Receipt) -> int:
    return len(_NON_ALNUM_RE.sub("", receipt.retailer)) * RETAILER_CHAR_POINTS


def _round_dollar_total(receipt: Receipt) -> int:
    # Literal suffix check; "10.0" is numerically round but does not qualify.
    return ROUND_DOLLAR_POINTS if receipt.total_amount.has_no_cents else 0


def _quarter_multiple_total(receipt: Receipt) -> int:
    total = receipt.total_amount.value
    if total is None:
        return 0
    try:
        remainder = total % QUARTER
    except InvalidOperation:
        # quotient wider than the decimal context precision
        return 0
    return QUARTER_MULTIPLE_POINTS if remainder == 0 else 0


def _item_pairs(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def _item_description_points(item: Item) -> int:
    # An empty description after trimming has length 0 and still qualifies.
    if len(item.short_description.strip()) % DESCRIPTION_LENGTH_DIVISOR != 0:
        return 0
    price = item.price_amount.value
    if price is None:
        return 0
    try:
        return math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER)
    except ArithmeticError:
        return 0


def _item_descriptions(receipt: Receipt) -> int:
    return sum(_item_description_points(item) for item in receipt.items)


def _odd_purchase_day(receipt: Receipt) -> int:
    purchased_on = receipt.purchase_date_value.value
    if purchased_on is None:
        return 0
    return ODD_DAY_POINTS if purchased_on.day % 2 == 1 else 0


def _afternoon_purchase(receipt: Receipt) -> int:
    purchased_at = receipt.purchase_time_value.value
    if purchased_at is None:
        return 0
    if AFTERNOON_START_HOUR <= purchased_at.hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS
    return 0


RULES: Tuple[Tuple[str, Callable[[Receipt], int]], ...] = (
    ("retailer_name", _retailer_name),
    ("round_dollar_total", _round_dollar_total),
    ("quarter_multiple_total", _quarter_multiple_total),
    ("item_pairs", _item_pairs),
    ("item_descriptions", _item_descriptions),
    ("odd_purchase_day", _odd_purchase_day),
    ("afternoon_purchase", _afternoon_purchase),
)


def score_breakdown(receipt: Receipt) -> Dict[str, int]:
    """Return the points each rule awards ``receipt``, keyed by rule name.

    The keys follow the order of :data:`RULES`. Summing the values gives
    the same result as :func:`compute_points`.
    """
    return {name: rule(receipt) for name, rule in RULES}


def compute_points(receipt: Receipt) -> int:
    """Compute the total reward points for a receipt.

    :param receipt: A structurally valid receipt. Malformed amounts,
        dates or times are tolerated.
    :returns: A non-negative integer; identical receipts always score
        the same.
    """
    return sum(rule(receipt) for _, rule in RULES)

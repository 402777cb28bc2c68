"""Pydantic schemas for request and response models.

``Receipt`` and ``Item`` describe the JSON contract of the receipt API.
Wire names are camelCase (``purchaseDate``) and are exposed in Python as
snake_case attributes (``purchase_date``). Currency, date and time fields
stay strings exactly as submitted; scoring rules read them through the
value wrappers in :mod:`receipt_processor.models.values`, which handle
malformed text themselves. Only the structure is validated here.
"""

from __future__ import annotations

from functools import cached_property
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .values import Amount, PurchaseDate, PurchaseTime

_WIRE_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Domain schemas


class Item(BaseModel):
    """Individual line item on a receipt."""

    model_config = _WIRE_CONFIG

    short_description: str = Field(alias="shortDescription", description="Short product description")
    price: str = Field(description="Item price, e.g. 6.49")

    @cached_property
    def price_amount(self) -> Amount:
        return Amount(self.price)


class Receipt(BaseModel):
    """A submitted retail receipt.

    ``id`` is assigned by the receipt store; any value sent by a client
    is replaced when the receipt is stored.
    """

    model_config = _WIRE_CONFIG

    id: Optional[str] = None
    retailer: str
    purchase_date: str = Field(alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: str = Field(alias="purchaseTime", description="24-hour HH:MM")
    items: List[Item] = Field(default_factory=list)
    total: str = Field(description="Total amount paid, e.g. 35.35")

    @cached_property
    def total_amount(self) -> Amount:
        return Amount(self.total)

    @cached_property
    def purchase_date_value(self) -> PurchaseDate:
        return PurchaseDate(self.purchase_date)

    @cached_property
    def purchase_time_value(self) -> PurchaseTime:
        return PurchaseTime(self.purchase_time)

    def with_id(self, receipt_id: str) -> "Receipt":
        return self.model_copy(update={"id": receipt_id})

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# API response schemas


class ReceiptIdResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class PointsBreakdownResponse(BaseModel):
    points: int
    rules: Dict[str, int]

from __future__ import annotations

import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError

from receipt_processor.models import Amount, PurchaseDate, PurchaseTime, Receipt


def test_receipt_reads_wire_names(target_payload):
    receipt = Receipt.model_validate(target_payload)
    assert receipt.purchase_date == "2022-01-01"
    assert receipt.purchase_time == "13:01"
    assert receipt.items[4].short_description == "   Klarbrunn 12-PK 12 FL OZ  "
    assert receipt.id is None


def test_receipt_keeps_item_order(target_payload):
    receipt = Receipt.model_validate(target_payload)
    assert [item.price for item in receipt.items] == ["6.49", "12.25", "1.26", "3.35", "12.00"]


def test_receipt_is_immutable(target_receipt):
    with pytest.raises(ValidationError):
        target_receipt.total = "1.00"


def test_with_id_returns_copy(target_receipt):
    stored = target_receipt.with_id("abc")
    assert stored.id == "abc"
    assert target_receipt.id is None
    assert stored.total == target_receipt.total


def test_to_wire_uses_submitted_names(target_receipt):
    wire = target_receipt.with_id("abc").to_wire()
    assert wire["id"] == "abc"
    assert wire["purchaseDate"] == "2022-01-01"
    assert wire["items"][0] == {"shortDescription": "Mountain Dew 12PK", "price": "6.49"}
    assert "id" not in target_receipt.to_wire()


@pytest.mark.parametrize("missing", ["retailer", "purchaseDate", "purchaseTime", "total"])
def test_missing_field_is_rejected(target_payload, missing):
    target_payload.pop(missing)
    with pytest.raises(ValidationError):
        Receipt.model_validate(target_payload)


def test_numeric_total_is_rejected(target_payload):
    target_payload["total"] = 35.35
    with pytest.raises(ValidationError):
        Receipt.model_validate(target_payload)


def test_malformed_strings_are_accepted(target_payload):
    target_payload.update(total="lots", purchaseDate="soon", purchaseTime="later")
    receipt = Receipt.model_validate(target_payload)
    assert receipt.total_amount.value is None
    assert receipt.purchase_date_value.value is None
    assert receipt.purchase_time_value.value is None


def test_empty_items_allowed(target_payload):
    target_payload["items"] = []
    assert Receipt.model_validate(target_payload).items == []


def test_amount_wrapper():
    amount = Amount("12.25")
    assert amount.raw == "12.25"
    assert amount.value == Decimal("12.25")
    assert not amount.has_no_cents
    assert Amount("10.00").has_no_cents
    assert not Amount("10.0").has_no_cents
    assert str(amount) == "12.25"


def test_amount_value_is_cached():
    amount = Amount("6.49")
    assert amount.value is amount.value


def test_date_and_time_wrappers():
    assert PurchaseDate("2022-01-01").value == dt.date(2022, 1, 1)
    assert PurchaseTime("14:33").value == dt.time(14, 33)
    assert PurchaseDate("2022-13-01").value is None
    assert repr(PurchaseTime("x")) == "PurchaseTime('x')"


def test_receipt_reuses_parsed_wrappers(target_receipt):
    from receipt_processor.services.points_engine import compute_points

    compute_points(target_receipt)
    assert target_receipt.total_amount is target_receipt.total_amount
    assert target_receipt.purchase_date_value is target_receipt.purchase_date_value
    assert target_receipt.purchase_time_value is target_receipt.purchase_time_value
    item = target_receipt.items[1]
    assert item.price_amount is item.price_amount
    assert item.price_amount.value is item.price_amount.value


def test_cached_wrappers_stay_out_of_serialisation(target_receipt):
    target_receipt.total_amount.value
    target_receipt.items[0].price_amount.value
    wire = target_receipt.to_wire()
    assert set(wire) == {"retailer", "purchaseDate", "purchaseTime", "items", "total"}
    assert set(wire["items"][0]) == {"shortDescription", "price"}

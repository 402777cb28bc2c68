from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so `import receipt_processor...` works without an install
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from receipt_processor.models.schemas import Receipt  # noqa: E402

SAMPLES_DIR = ROOT_DIR / "samples"

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [{"shortDescription": "Gatorade", "price": "2.25"} for _ in range(4)],
    "total": "9.00",
}


def make_receipt(**overrides) -> Receipt:
    """Build a receipt that scores nothing except for the overridden fields."""
    data = {
        "retailer": "",
        "purchaseDate": "2022-01-02",
        "purchaseTime": "10:00",
        "items": [],
        "total": "1.01",
    }
    data.update(overrides)
    return Receipt.model_validate(data)


@pytest.fixture
def target_receipt() -> Receipt:
    return Receipt.model_validate(TARGET_RECEIPT)


@pytest.fixture
def corner_market_receipt() -> Receipt:
    return Receipt.model_validate(CORNER_MARKET_RECEIPT)


@pytest.fixture
def receipt_factory():
    return make_receipt


@pytest.fixture
def target_payload() -> dict:
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def corner_market_payload() -> dict:
    return copy.deepcopy(CORNER_MARKET_RECEIPT)


@pytest.fixture
def samples_dir() -> Path:
    return SAMPLES_DIR

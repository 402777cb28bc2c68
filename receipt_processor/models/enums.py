"""Enumeration types used throughout the receipt processing API."""

from enum import Enum


class ReceiptStoreBackend(str, Enum):
    """Where submitted receipts are kept."""

    MEMORY = "memory"
    REDIS = "redis"

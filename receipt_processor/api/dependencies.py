"""Common dependencies for FastAPI routes.

Routes receive the receipt store through :func:`get_receipt_store` so
tests can swap it with ``app.dependency_overrides``.
"""

from __future__ import annotations

from typing import Optional

from receipt_processor.services.receipt_store import ReceiptStore, build_receipt_store

# -----------------------------------------------------------------------------
# Shared resources

_receipt_store: Optional[ReceiptStore] = None


def get_receipt_store() -> ReceiptStore:
    """Return the process-wide receipt store, building it on first use."""
    global _receipt_store
    if _receipt_store is None:
        _receipt_store = build_receipt_store()
    return _receipt_store


async def close_receipt_store() -> None:
    global _receipt_store
    if _receipt_store is not None:
        await _receipt_store.close()
        _receipt_store = None

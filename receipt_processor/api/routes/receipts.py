"""API routes for receipt submission and points lookup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from receipt_processor.api.dependencies import get_receipt_store
from receipt_processor.core.observability import sentry_breadcrumb, sentry_set_tags
from receipt_processor.models.schemas import (
    PointsBreakdownResponse,
    PointsResponse,
    Receipt,
    ReceiptIdResponse,
)
from receipt_processor.services.points_engine import compute_points, score_breakdown
from receipt_processor.services.receipt_store import ReceiptStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post("/process", response_model=ReceiptIdResponse)
async def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_receipt_store)):
    """Store a submitted receipt and return its new identifier."""
    receipt_id = await store.put(receipt)
    sentry_breadcrumb("receipts", "receipt stored", data={"receipt_id": receipt_id})
    logger.info("[receipts] stored id=%s items=%d", receipt_id, len(receipt.items))
    return ReceiptIdResponse(id=receipt_id)


@router.get("/{receipt_id}/points", response_model=PointsResponse)
async def get_points(receipt_id: str, store: ReceiptStore = Depends(get_receipt_store)):
    """Return the points awarded to a stored receipt."""
    receipt = await store.get(receipt_id)
    sentry_set_tags({"receipt_id": receipt_id})
    points = compute_points(receipt)
    logger.info("[receipts] scored id=%s points=%d", receipt_id, points)
    return PointsResponse(points=points)


@router.get("/{receipt_id}/breakdown", response_model=PointsBreakdownResponse)
async def get_points_breakdown(receipt_id: str, store: ReceiptStore = Depends(get_receipt_store)):
    """Return the points awarded by each rule for a stored receipt."""
    receipt = await store.get(receipt_id)
    rules = score_breakdown(receipt)
    return PointsBreakdownResponse(points=sum(rules.values()), rules=rules)


@router.get("/{receipt_id}")
async def get_receipt(receipt_id: str, store: ReceiptStore = Depends(get_receipt_store)):
    """Return a stored receipt using the submitted field names."""
    receipt = await store.get(receipt_id)
    return receipt.to_wire()

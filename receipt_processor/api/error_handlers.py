"""
Custom exception handlers for FastAPI.
Provides clear, actionable error messages for invalid receipts, unknown
receipt ids and server errors.
"""

import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from receipt_processor.core.observability import sentry_capture
from receipt_processor.services.receipt_store import ReceiptNotFoundError

logger = logging.getLogger(__name__)

INVALID_RECEIPT_MESSAGE = "The receipt is invalid."
RECEIPT_NOT_FOUND_MESSAGE = "No receipt found for that ID."


def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("[api] rejected request path=%s errors=%d", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "error": INVALID_RECEIPT_MESSAGE,
            "details": jsonable_encoder(exc.errors()),
        },
    )


def receipt_not_found_handler(request: Request, exc: ReceiptNotFoundError):
    logger.info("[api] receipt not found id=%s", exc.receipt_id)
    return JSONResponse(
        status_code=HTTP_404_NOT_FOUND,
        content={"error": RECEIPT_NOT_FOUND_MESSAGE},
    )


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("[api] unhandled error path=%s", request.url.path, exc_info=exc)
    sentry_capture(exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )

"""Entry point for the FastAPI application.

This module constructs the FastAPI app, includes the receipt router and
sets up startup and shutdown handling. Run it with uvicorn::

    uvicorn receipt_processor.api.main:app --port 8080

or through the ``receipt-processor`` console script.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from receipt_processor.api.dependencies import close_receipt_store, get_receipt_store
from receipt_processor.api.error_handlers import (
    generic_exception_handler,
    receipt_not_found_handler,
    validation_exception_handler,
)
from receipt_processor.api.routes.receipts import router as receipts_router
from receipt_processor.core.config import settings
from receipt_processor.core.observability import configure_logging, init_sentry
from receipt_processor.services.receipt_store import ReceiptNotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    configure_logging()
    logger.info("Starting up...")
    if init_sentry("api"):
        logger.info("Sentry SDK initialized (api)")
    get_receipt_store()
    yield
    # Shutdown
    logger.info("Shutting down...")
    await close_receipt_store()


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    lifespan=lifespan,
)

# CORS: allow everything in development, the configured origins otherwise.
allow_origins = ["*"] if settings.is_development else list(settings.BACKEND_CORS_ORIGINS or [])

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials="*" not in allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register custom exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ReceiptNotFoundError, receipt_not_found_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include routers
app.include_router(receipts_router)


@app.api_route("/health", methods=["GET", "HEAD"])
async def health_check():
    """Health check endpoint (supports GET & HEAD)."""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "store": settings.RECEIPT_STORE_BACKEND,
    }


def run() -> None:
    """Serve the API with uvicorn on ``HOST``:``PORT``."""
    uvicorn.run("receipt_processor.api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":  # pragma: no cover
    run()

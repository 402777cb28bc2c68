"""Receipt store abstraction.

Supports two backends selected via ``settings.RECEIPT_STORE_BACKEND``:

1. **memory** (default): Receipts live in a process-wide dictionary
   guarded by a lock. Nothing is evicted and nothing survives a restart.
2. **redis**: Receipts are stored as JSON (wire field names) under
   ``receipt:<id>`` so several API workers can share them. An optional
   ``RECEIPT_TTL_SECONDS`` expires old receipts.

Both backends generate a fresh ``uuid4`` identifier on ``put`` and raise
:class:`ReceiptNotFoundError` from ``get`` for unknown identifiers.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Optional, Protocol

from redis import asyncio as aioredis

from receipt_processor.core.config import Settings, settings as default_settings
from receipt_processor.models.enums import ReceiptStoreBackend
from receipt_processor.models.schemas import Receipt

logger = logging.getLogger(__name__)

KEY_PREFIX = "receipt:"


class ReceiptNotFoundError(LookupError):
    """Raised when no receipt is stored under the requested identifier."""

    def __init__(self, receipt_id: str) -> None:
        super().__init__(f"receipt {receipt_id!r} not found")
        self.receipt_id = receipt_id


class ReceiptStore(Protocol):
    async def put(self, receipt: Receipt) -> str: ...

    async def get(self, receipt_id: str) -> Receipt: ...

    async def close(self) -> None: ...


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class InMemoryReceiptStore:
    """Keeps receipts in a dictionary for the life of the process."""

    def __init__(self) -> None:
        self._receipts: Dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)

    async def put(self, receipt: Receipt) -> str:
        receipt_id = new_receipt_id()
        with self._lock:
            self._receipts[receipt_id] = receipt.with_id(receipt_id)
        return receipt_id

    async def get(self, receipt_id: str) -> Receipt:
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFoundError(receipt_id)
        return receipt

    async def close(self) -> None:
        return None


class RedisReceiptStore:
    """Stores receipts in Redis as JSON documents."""

    def __init__(self, client, ttl_seconds: Optional[int] = None) -> None:
        self._client = client
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_url(cls, url: str, ttl_seconds: Optional[int] = None) -> "RedisReceiptStore":
        return cls(aioredis.from_url(url, decode_responses=True), ttl_seconds=ttl_seconds)

    @staticmethod
    def key_for(receipt_id: str) -> str:
        return f"{KEY_PREFIX}{receipt_id}"

    async def put(self, receipt: Receipt) -> str:
        receipt_id = new_receipt_id()
        payload = receipt.with_id(receipt_id).model_dump_json(by_alias=True)
        await self._client.set(self.key_for(receipt_id), payload, ex=self.ttl_seconds)
        return receipt_id

    async def get(self, receipt_id: str) -> Receipt:
        raw = await self._client.get(self.key_for(receipt_id))
        if raw is None:
            raise ReceiptNotFoundError(receipt_id)
        return Receipt.model_validate_json(raw)

    async def close(self) -> None:
        await self._client.aclose()


def build_receipt_store(config: Settings | None = None) -> ReceiptStore:
    """Create the store configured by ``RECEIPT_STORE_BACKEND``.

    Raises ``ValueError`` for an unknown backend name.
    """
    config = config or default_settings
    backend = ReceiptStoreBackend((config.RECEIPT_STORE_BACKEND or "memory").lower())
    if backend is ReceiptStoreBackend.REDIS:
        logger.info("[store] using redis backend ttl=%s", config.RECEIPT_TTL_SECONDS)
        return RedisReceiptStore.from_url(config.REDIS_URL, ttl_seconds=config.RECEIPT_TTL_SECONDS)
    logger.info("[store] using in-memory backend")
    return InMemoryReceiptStore()

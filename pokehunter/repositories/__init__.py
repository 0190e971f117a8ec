"""
Persistence adapters.

Two backends implement the same ``Storage`` contract: ``MemoryStorage``
(seeded, process-local) and ``SQLRepository`` (SQLAlchemy). Which one the
application uses is decided once, from ``STORAGE_BACKEND``, by
``get_storage()``; routers only ever see ``Storage``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pokehunter.core.config import STORAGE_BACKENDS, get_settings
from pokehunter.repositories.base import Storage

logger = logging.getLogger(__name__)


def build_storage(backend: str) -> Storage:
    if backend == "memory":
        from pokehunter.repositories.memory_storage import MemoryStorage

        return MemoryStorage()
    if backend == "sql":
        from pokehunter.repositories.sql_repository import SQLRepository

        return SQLRepository()
    raise ValueError(f"Unknown storage backend {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}")


@lru_cache
def get_storage() -> Storage:
    backend = get_settings().storage_backend
    storage = build_storage(backend)
    logger.info("Using %s storage backend", storage.name)
    return storage


__all__ = ["Storage", "build_storage", "get_storage"]

"""
Process-wide interest store handle.

The variant is selected once at startup:
- TURSO_DATABASE_URL and TURSO_AUTH_TOKEN both set -> SqlInterestStore
- otherwise                                         -> MemoryInterestStore
"""

from __future__ import annotations

import logging

from core import db

from .repository import SqlInterestStore
from .store import InterestStore, MemoryInterestStore

logger = logging.getLogger(__name__)

_store: InterestStore | None = None


def _set_or_not(value: str) -> str:
    return "SET" if value else "NOT SET"


async def init_store() -> InterestStore:
    global _store
    if _store is not None:
        return _store

    logger.info(
        "store_config TURSO_DATABASE_URL=%s TURSO_AUTH_TOKEN=%s",
        _set_or_not(db.database_url()),
        _set_or_not(db.auth_token()),
    )

    if db.is_configured():
        await db.init_client()
        store = SqlInterestStore()
        try:
            await store.ensure_schema()
        except Exception:
            await db.close_client()
            raise
        _store = store
    else:
        logger.warning(
            "store_fallback reason=%s",
            "TURSO_DATABASE_URL and/or TURSO_AUTH_TOKEN not set; data will not survive a restart",
        )
        _store = MemoryInterestStore()

    logger.info("store_selected store=%s", _store.name)
    return _store


async def close_store() -> None:
    global _store
    if _store is None:
        return None
    await _store.close()
    _store = None


def get_store() -> InterestStore:
    if _store is None:
        raise RuntimeError("Interest store is not initialized. Call init_store() on startup.")
    return _store

"""
Interest store contract and the in-memory fallback.

Both variants honor the same return-value and ordering contract:
- `get_by_id` returns None for a missing id (not an error)
- `update` / `delete` return the affected row count (0 or 1), never upsert
- `list` is newest first (created_at DESC, then id DESC)
- `sum` returns 0 for an empty store

Any failure of the underlying storage surfaces as `StoreError`.
"""

from __future__ import annotations

import abc
import threading
from datetime import datetime, timezone
from typing import Any

from .schemas import Interest, InterestFields

SUMMABLE_COLUMNS = ("textbox3", "textbox4")

# SQLite INTEGER PRIMARY KEY range.
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1

# Same shape as SQLite CURRENT_TIMESTAMP.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class StoreError(RuntimeError):
    """
    Storage call failed. `message` is safe to show; the cause is chained.
    """

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation


def check_summable(column: str) -> str:
    if column not in SUMMABLE_COLUMNS:
        raise ValueError(f"Column is not summable: {column!r}")
    return column


def is_storable_id(interest_id: int) -> bool:
    return MIN_ROW_ID <= interest_id <= MAX_ROW_ID


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


class InterestStore(abc.ABC):
    name: str = "abstract"

    @abc.abstractmethod
    async def create(self, fields: InterestFields) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    async def list(self) -> list[Interest]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_by_id(self, interest_id: int) -> Interest | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def update(self, interest_id: int, fields: InterestFields) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    async def delete(self, interest_id: int) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    async def sum(self, column: str) -> float:
        raise NotImplementedError

    async def close(self) -> None:
        return None


class MemoryInterestStore(InterestStore):
    """
    Volatile store used when no durable database is configured.

    State lives only in this process. Ids come from a counter that never goes
    back, so deleted ids are not reused.
    """

    name = "memory"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: dict[int, dict[str, Any]] = {}
        self._next_id = 1

    async def create(self, fields: InterestFields) -> int:
        with self._lock:
            interest_id = self._next_id
            self._next_id += 1
            self._rows[interest_id] = {
                **fields.model_dump(),
                "id": interest_id,
                "created_at": utc_timestamp(),
            }
            return interest_id

    async def list(self) -> list[Interest]:
        with self._lock:
            rows = sorted(
                self._rows.values(),
                key=lambda row: (row["created_at"], row["id"]),
                reverse=True,
            )
            return [Interest(**row) for row in rows]

    async def get_by_id(self, interest_id: int) -> Interest | None:
        with self._lock:
            row = self._rows.get(interest_id)
            return Interest(**row) if row is not None else None

    async def update(self, interest_id: int, fields: InterestFields) -> int:
        with self._lock:
            row = self._rows.get(interest_id)
            if row is None:
                return 0
            self._rows[interest_id] = {**row, **fields.model_dump()}
            return 1

    async def delete(self, interest_id: int) -> int:
        with self._lock:
            return 1 if self._rows.pop(interest_id, None) is not None else 0

    async def sum(self, column: str) -> float:
        column = check_summable(column)
        with self._lock:
            return float(sum(row[column] for row in self._rows.values()))

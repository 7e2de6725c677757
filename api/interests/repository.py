"""
Interest persistence (raw SQL) over the libSQL client.

Every operation is a single auto-committed statement.
"""

from __future__ import annotations

from core import db

from .schemas import Interest, InterestFields
from .store import InterestStore, StoreError, check_summable, is_storable_id

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS interests (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    textbox1 TEXT,
    textbox2 TEXT,
    textbox3 REAL,
    textbox4 REAL,
    textbox5 TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
)
"""


def _to_interest(row: dict) -> Interest:
    return Interest(
        id=int(row["id"]),
        textbox1=row["textbox1"] or "",
        textbox2=row["textbox2"] or "",
        textbox3=float(row["textbox3"] or 0),
        textbox4=float(row["textbox4"] or 0),
        textbox5=row["textbox5"] or "",
        created_at=str(row["created_at"]),
    )


def _field_args(fields: InterestFields) -> tuple:
    return (fields.textbox1, fields.textbox2, fields.textbox3, fields.textbox4, fields.textbox5)


class SqlInterestStore(InterestStore):
    """
    Durable store. The libSQL client is owned by `core.db`.
    """

    name = "sql"

    async def ensure_schema(self) -> None:
        try:
            await db.execute(CREATE_TABLE_SQL)
        except Exception as exc:
            raise StoreError("Failed to initialize database", operation="init") from exc

    async def create(self, fields: InterestFields) -> int:
        try:
            result = await db.execute(
                """
                INSERT INTO interests (textbox1, textbox2, textbox3, textbox4, textbox5)
                VALUES (?, ?, ?, ?, ?)
                """,
                *_field_args(fields),
            )
        except Exception as exc:
            raise StoreError("Failed to create interest", operation="create") from exc
        if result.last_insert_rowid is None:
            raise StoreError("Failed to create interest", operation="create")
        return int(result.last_insert_rowid)

    async def list(self) -> list[Interest]:
        try:
            rows = await db.fetch_all(
                """
                SELECT id, textbox1, textbox2, textbox3, textbox4, textbox5, created_at
                FROM interests
                ORDER BY created_at DESC, id DESC
                """
            )
        except Exception as exc:
            raise StoreError("Failed to fetch interests", operation="list") from exc
        return [_to_interest(r) for r in rows]

    async def get_by_id(self, interest_id: int) -> Interest | None:
        # An id SQLite cannot bind cannot exist either.
        if not is_storable_id(interest_id):
            return None
        try:
            row = await db.fetch_one(
                """
                SELECT id, textbox1, textbox2, textbox3, textbox4, textbox5, created_at
                FROM interests
                WHERE id = ?
                """,
                interest_id,
            )
        except Exception as exc:
            raise StoreError("Failed to fetch interest", operation="get_by_id") from exc
        return _to_interest(row) if row is not None else None

    async def update(self, interest_id: int, fields: InterestFields) -> int:
        if not is_storable_id(interest_id):
            return 0
        try:
            result = await db.execute(
                """
                UPDATE interests
                SET textbox1 = ?, textbox2 = ?, textbox3 = ?, textbox4 = ?, textbox5 = ?
                WHERE id = ?
                """,
                *_field_args(fields),
                interest_id,
            )
        except Exception as exc:
            raise StoreError("Failed to update interest", operation="update") from exc
        return int(result.rows_affected)

    async def delete(self, interest_id: int) -> int:
        if not is_storable_id(interest_id):
            return 0
        try:
            result = await db.execute("DELETE FROM interests WHERE id = ?", interest_id)
        except Exception as exc:
            raise StoreError("Failed to delete interest", operation="delete") from exc
        return int(result.rows_affected)

    async def sum(self, column: str) -> float:
        # Column names cannot be bound; only whitelisted names reach the SQL.
        column = check_summable(column)
        try:
            row = await db.fetch_one(f"SELECT SUM({column}) AS total FROM interests")
        except Exception as exc:
            raise StoreError(f"Failed to calculate sum of {column}", operation="sum") from exc
        if row is None or row["total"] is None:
            return 0.0
        return float(row["total"])

    async def close(self) -> None:
        await db.close_client()

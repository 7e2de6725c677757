"""
Pytest configuration for the interests API.

Provides fixtures for:
- both store variants (memory, and SQL on a local libSQL file)
- a TestClient running the app lifespan with the memory store
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from core import db
from interests.repository import SqlInterestStore
from interests.schemas import InterestFields
from interests.store import InterestStore, MemoryInterestStore


def make_fields(
    textbox1: str = "a",
    textbox2: str = "b",
    textbox3: float = 10.0,
    textbox4: float = 4.0,
    textbox5: str = "c",
) -> InterestFields:
    return InterestFields(
        textbox1=textbox1,
        textbox2=textbox2,
        textbox3=textbox3,
        textbox4=textbox4,
        textbox5=textbox5,
    )


@pytest.fixture()
def fields_factory():
    return make_fields


@pytest.fixture(autouse=True)
def no_turso_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Tests default to the memory store unless they set the variables themselves.
    """
    monkeypatch.delenv("TURSO_DATABASE_URL", raising=False)
    monkeypatch.delenv("TURSO_AUTH_TOKEN", raising=False)


@pytest.fixture()
def local_db_url(tmp_path: Path) -> str:
    return f"file:{tmp_path / 'interests.db'}"


@pytest_asyncio.fixture(params=["memory", "sql"])
async def store(request: pytest.FixtureRequest, local_db_url: str) -> AsyncIterator[InterestStore]:
    if request.param == "memory":
        yield MemoryInterestStore()
        return

    await db.init_client(url=local_db_url, token="")
    sql = SqlInterestStore()
    try:
        await sql.ensure_schema()
        yield sql
    finally:
        await sql.close()


@pytest.fixture()
def client() -> Iterator[TestClient]:
    from main import app

    with TestClient(app) as test_client:
        yield test_client

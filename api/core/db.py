"""
Async database access helpers (raw SQL) using the libSQL client.

This module owns the single libSQL client. The interests store initializes it
on startup and closes it on shutdown (see `interests/dependencies.py`).

Supported URLs:
- libsql:// / wss:// / https://  -> remote managed database (Turso)
- file:<path>                    -> local embedded SQLite file

SQL parameter style:
- libSQL uses positional `?` placeholders.
"""

from __future__ import annotations

import os
from typing import Any, Sequence
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import libsql_client

_client: libsql_client.Client | None = None


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    # The token only ever comes from TURSO_AUTH_TOKEN.
    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "authToken"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    return os.environ.get("TURSO_DATABASE_URL", "").strip()


def auth_token() -> str:
    return os.environ.get("TURSO_AUTH_TOKEN", "").strip()


def is_configured() -> bool:
    return bool(database_url()) and bool(auth_token())


def _is_local_file(url: str) -> bool:
    return url.startswith("file:")


async def init_client(url: str | None = None, token: str | None = None) -> None:
    global _client
    if _client is not None:
        return None

    url = _sanitize_database_url((url if url is not None else database_url()).strip())
    if not url:
        raise RuntimeError("TURSO_DATABASE_URL is not set.")
    token = token if token is not None else auth_token()

    if _is_local_file(url):
        _client = libsql_client.create_client(url)
    else:
        _client = libsql_client.create_client(url, auth_token=token or None)


async def close_client() -> None:
    global _client
    if _client is None:
        return None
    await _client.close()
    _client = None


def client() -> libsql_client.Client:
    if _client is None:
        raise RuntimeError("DB client is not initialized. Call init_client() on startup.")
    return _client


def _row_to_dict(columns: Sequence[str], row: Any) -> dict[str, Any]:
    return {column: row[idx] for idx, column in enumerate(columns)}


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    result = await client().execute(sql, list(args))
    if not result.rows:
        return None
    return _row_to_dict(result.columns, result.rows[0])


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    result = await client().execute(sql, list(args))
    return [_row_to_dict(result.columns, r) for r in result.rows]


async def execute(sql: str, *args: Any) -> libsql_client.ResultSet:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL).

    The result set carries `rows_affected` and `last_insert_rowid`.
    """
    return await client().execute(sql, list(args))

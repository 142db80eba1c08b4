"""
Storage executor for the person table: one asyncpg pool per process.

- `fetch_all` runs the repository's queries and returns rows as dicts.
- `execute` / `execute_many` are used by `people.seed` for table setup and
  demo rows.

The pool is opened by the FastAPI lifespan (see `api/main.py`) or by the seed
script. The module itself satisfies `QueryExecutor`, so repositories receive
it as a constructor argument.

asyncpg uses positional placeholders: $1, $2, ...
"""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable, Protocol, Sequence
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

POOL_MIN_SIZE = 1
POOL_MAX_SIZE = 5
COMMAND_TIMEOUT_S = 30

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


class QueryExecutor(Protocol):
    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        ...


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq-only options such as sslmode.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=POOL_MIN_SIZE,
        max_size=POOL_MAX_SIZE,
        command_timeout=COMMAND_TIMEOUT_S,
    )
    logger.info("db_pool_initialized min_size=%s max_size=%s", POOL_MIN_SIZE, POOL_MAX_SIZE)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return its rows as dicts keyed by column name.

    Every person query goes through here, including the INSERT ... RETURNING.
    """
    rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> None:
    """
    Run one DDL or maintenance statement (CREATE TABLE, TRUNCATE).
    """
    await pool().execute(sql, *args)


async def execute_many(sql: str, records: Iterable[Sequence[Any]]) -> None:
    """
    Run one parameterized statement once per record (bulk seed inserts).
    """
    await pool().executemany(sql, records)

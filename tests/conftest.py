# tests/conftest.py
from __future__ import annotations

from typing import Any

import pytest


class StubExecutor:
    """
    Stands in for `core.db`: records every (sql, args) call and returns the
    canned rows, or raises `error` when one is set.
    """

    def __init__(self, rows: list[dict[str, Any]] | None = None, error: Exception | None = None) -> None:
        self.rows = rows or []
        self.error = error
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error
        return [dict(r) for r in self.rows]

    @property
    def last_args(self) -> tuple[Any, ...]:
        assert self.calls, "executor was never called"
        return self.calls[-1][1]


@pytest.fixture()
def executor() -> StubExecutor:
    return StubExecutor()

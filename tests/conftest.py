"""Shared fixtures: a scripted stand-in for a psycopg connection."""

from __future__ import annotations

from typing import Any

import pytest

from contentstore.store import ContentStore

ADMIN_PASSWORD = "correct horse battery staple"


class FakeCursor:
    """Records executed SQL and replays the next scripted result.

    A scripted result is a dict (one row), a list (many rows), an int
    (rowcount with no rows) or None (no rows).
    """

    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn
        self.rows: list[dict] = []
        self.rowcount = -1

    def __enter__(self) -> FakeCursor:
        return self

    def __exit__(self, *exc: object) -> bool:
        return False

    def execute(self, query: str, params: tuple | None = None) -> None:
        self.conn.executed.append((" ".join(query.split()), params))
        result: Any = self.conn.results.pop(0) if self.conn.results else None
        if isinstance(result, dict):
            self.rows = [result]
        elif isinstance(result, list):
            self.rows = result
        else:
            self.rows = []
        self.rowcount = result if isinstance(result, int) else len(self.rows)

    def fetchone(self) -> dict | None:
        return self.rows[0] if self.rows else None

    def fetchall(self) -> list[dict]:
        return list(self.rows)


class FakeConnection:
    def __init__(self) -> None:
        self.results: list[Any] = []
        self.executed: list[tuple[str, tuple | None]] = []
        self.commits = 0

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def commit(self) -> None:
        self.commits += 1

    @property
    def statements(self) -> list[str]:
        return [sql for sql, _ in self.executed]


@pytest.fixture()
def conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture()
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture()
def store(conn: FakeConnection) -> ContentStore:
    from contentstore.config import ShortcutConfig

    return ContentStore(
        conn,
        admin_password=ADMIN_PASSWORD,
        shortcuts=[
            ShortcutConfig(name="Food Blog", url="/food"),
            ShortcutConfig(name="About", url="/about"),
        ],
    )

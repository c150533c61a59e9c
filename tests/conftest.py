from __future__ import annotations

from typing import Any

import psycopg2
import pytest


class FakeCursor:
    """Records executed statements and serves the next queued result set."""

    def __init__(self, db: "FakeDatabase", cursor_factory: Any = None) -> None:
        self._db = db
        self.cursor_factory = cursor_factory
        self._rows: list = []

    def __enter__(self) -> "FakeCursor":
        return self

    def __exit__(self, *exc: Any) -> None:
        return None

    def execute(self, sql: str, params: Any = None) -> None:
        self._db.executed.append((sql, params, self.cursor_factory))
        if self._db.execute_error is not None:
            raise self._db.execute_error
        self._rows = self._db.results.pop(0) if self._db.results else []

    def fetchone(self) -> Any:
        return self._rows[0] if self._rows else None

    def fetchall(self) -> list:
        return list(self._rows)


class FakeConnection:
    def __init__(self, db: "FakeDatabase", dsn: str) -> None:
        self._db = db
        self.dsn = dsn
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, cursor_factory: Any = None) -> FakeCursor:
        return FakeCursor(self._db, cursor_factory)

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True

    def close(self) -> None:
        self.closed = True


class FakeDatabase:
    """Stands in for psycopg2.connect; each entry in `results` answers one execute()."""

    def __init__(self) -> None:
        self.results: list[list] = []
        self.executed: list[tuple] = []
        self.connections: list[FakeConnection] = []
        self.execute_error: Exception | None = None
        self.connect_error: Exception | None = None

    def connect(self, dsn: str) -> FakeConnection:
        if self.connect_error is not None:
            raise self.connect_error
        conn = FakeConnection(self, dsn)
        self.connections.append(conn)
        return conn

    @property
    def last_sql(self) -> str:
        return self.executed[-1][0]

    @property
    def last_params(self) -> Any:
        return self.executed[-1][1]


@pytest.fixture
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakeDatabase:
    db = FakeDatabase()
    monkeypatch.setattr(psycopg2, "connect", db.connect)
    return db

"""Shared fixtures: an in-memory Supabase stand-in and an authenticated API client."""

from __future__ import annotations

import copy
import itertools
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_database
from app.features.database.client import DatabaseClient

TEST_TOKEN = "test-token"
TEST_USER_ID = "user-1"
OTHER_TOKEN = "other-token"
OTHER_USER_ID = "user-2"

_EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeQuery:
    """Just enough of the postgrest query builder for the repositories."""

    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._op = "select"
        self._payload: Any = None
        self._filters: List[tuple] = []
        self._order: Optional[tuple] = None
        self._limit: Optional[int] = None
        self._on_conflict: Optional[str] = None

    def select(self, *columns: str) -> "FakeQuery":
        self._op = "select"
        return self

    def insert(self, payload: Dict[str, Any]) -> "FakeQuery":
        self._op, self._payload = "insert", payload
        return self

    def update(self, payload: Dict[str, Any]) -> "FakeQuery":
        self._op, self._payload = "update", payload
        return self

    def upsert(self, payload: Dict[str, Any], on_conflict: Optional[str] = None) -> "FakeQuery":
        self._op, self._payload, self._on_conflict = "upsert", payload, on_conflict
        return self

    def delete(self) -> "FakeQuery":
        self._op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def limit(self, count: int) -> "FakeQuery":
        self._limit = count
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self._filters)

    def execute(self) -> SimpleNamespace:
        self._db.calls.append((self._table, self._op))
        if self._db.fail_tables.get(self._table):
            raise RuntimeError(f"{self._table} unavailable")

        rows = self._db.tables.setdefault(self._table, [])

        if self._op == "insert":
            row = self._db.new_row(self._payload)
            rows.append(row)
            return SimpleNamespace(data=[copy.deepcopy(row)])

        if self._op == "upsert":
            key = self._on_conflict
            existing = next((r for r in rows if key and r.get(key) == self._payload.get(key)), None)
            if existing is None:
                existing = self._db.new_row(self._payload)
                rows.append(existing)
            else:
                existing.update(self._payload)
            return SimpleNamespace(data=[copy.deepcopy(existing)])

        matched = [r for r in rows if self._matches(r)]

        if self._op == "update":
            for row in matched:
                row.update(self._payload)
            return SimpleNamespace(data=copy.deepcopy(matched))

        if self._op == "delete":
            self._db.tables[self._table] = [r for r in rows if not self._matches(r)]
            return SimpleNamespace(data=copy.deepcopy(matched))

        if self._order:
            column, desc = self._order
            matched = sorted(matched, key=lambda r: r.get(column) or "", reverse=desc)
        if self._limit is not None:
            matched = matched[: self._limit]
        return SimpleNamespace(data=copy.deepcopy(matched))


class FakeAuth:
    def __init__(self, users: Dict[str, SimpleNamespace]):
        self._users = users

    def get_user(self, jwt: str) -> SimpleNamespace:
        if jwt not in self._users:
            raise RuntimeError("invalid JWT")
        return SimpleNamespace(user=self._users[jwt])


class FakeSupabase:
    """In-memory tables keyed by name, with ids and increasing created_at stamps."""

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.fail_tables: Dict[str, bool] = {}
        self.calls: List[tuple] = []
        self._ids = itertools.count(1)
        self.auth = FakeAuth({
            TEST_TOKEN: SimpleNamespace(
                id=TEST_USER_ID, email="ruth@example.com", user_metadata={"name": "Ruth"}
            ),
            OTHER_TOKEN: SimpleNamespace(id=OTHER_USER_ID, email="boaz@example.com", user_metadata={}),
        })

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def new_row(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        n = next(self._ids)
        row = {"id": f"row-{n}", "created_at": (_EPOCH + timedelta(seconds=n)).isoformat()}
        row.update(copy.deepcopy(payload))
        return row


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def db(fake_supabase: FakeSupabase) -> DatabaseClient:
    return DatabaseClient(fake_supabase)


@pytest.fixture
def app(db: DatabaseClient):
    from main import app as fastapi_app

    fastapi_app.dependency_overrides[get_database] = lambda: db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {TEST_TOKEN}"}

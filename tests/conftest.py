"""Shared test fixtures.

Sets fake Supabase environment variables before any roomie import and swaps
the Supabase client for an in-memory table store that understands the query
builder calls the services make.
"""

import os

# Patch env vars BEFORE any roomie imports
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "fake-anon-key-for-tests")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import copy
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

UNIQUE_COLUMNS = {"roommates": ["email"]}


class FakeAPIError(Exception):
    """Shaped like postgrest's APIError: carries the Postgres error code."""

    def __init__(self, message, code):
        super().__init__(message)
        self.code = code


class FakeQuery:
    def __init__(self, store, table):
        self.store = store
        self.table = table
        self.action = "select"
        self.payload = None
        self.filters = []
        self.orders = []
        self.row_limit = None

    def select(self, *columns):
        self.action = "select"
        return self

    def insert(self, payload):
        self.action = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.action = "update"
        self.payload = payload
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column, values):
        values = list(values)
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def contains(self, column, values):
        self.filters.append(lambda row: all(v in (row.get(column) or []) for v in values))
        return self

    def order(self, column, desc=False):
        self.orders.append((column, desc))
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def _matches(self, row):
        return all(f(row) for f in self.filters)

    def execute(self):
        rows = self.store.tables.setdefault(self.table, [])
        if self.action == "insert":
            data = [self.store.insert_row(self.table, r) for r in _as_list(self.payload)]
        elif self.action == "update":
            data = []
            for row in rows:
                if self._matches(row):
                    row.update(copy.deepcopy(self.payload))
                    data.append(copy.deepcopy(row))
        elif self.action == "delete":
            data = [copy.deepcopy(r) for r in rows if self._matches(r)]
            self.store.tables[self.table] = [r for r in rows if not self._matches(r)]
        else:
            data = [copy.deepcopy(r) for r in rows if self._matches(r)]
            # apply the last sort key first so earlier keys win
            for column, desc in reversed(self.orders):
                data.sort(key=lambda r: (r.get(column) is None, r.get(column) or ""), reverse=desc)
            if self.row_limit is not None:
                data = data[:self.row_limit]
        return SimpleNamespace(data=data)


def _as_list(payload):
    return payload if isinstance(payload, list) else [payload]


class FakeSupabase:
    """In-memory stand-in for supabase.Client."""

    def __init__(self):
        self.tables = {}
        self._clock = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
        self.auth = MagicMock()
        self.auth.admin.list_users.return_value = []
        self.functions = MagicMock()

    def table(self, name):
        return FakeQuery(self, name)

    def _tick(self):
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def insert_row(self, table, row):
        rows = self.tables.setdefault(table, [])
        for column in UNIQUE_COLUMNS.get(table, []):
            if any(r.get(column) == row.get(column) for r in rows):
                raise FakeAPIError(
                    f'duplicate key value violates unique constraint "{table}_{column}_key"',
                    code="23505",
                )
        stored = copy.deepcopy(row)
        stored.setdefault("id", str(uuid.uuid4()))
        stored.setdefault("created_at", self._tick())
        rows.append(stored)
        return copy.deepcopy(stored)

    def seed(self, table, rows):
        return [self.insert_row(table, row) for row in rows]


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def current_user():
    return {
        "id": "user-alex",
        "email": "alex@example.com",
        "display_name": "Alex",
        "user_metadata": {"full_name": "Alex"},
    }


@pytest.fixture
def client(fake_supabase, current_user):
    """FastAPI test client wired to the in-memory store and a signed-in user"""
    from roomie.main import app
    from roomie.core.dependencies import get_current_user
    from roomie.database.supabase_client import get_supabase, get_service_supabase

    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_service_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_current_user] = lambda: current_user
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def household(fake_supabase):
    """Three roommates: Alex (linked to the signed-in user), Blair and Casey."""
    return fake_supabase.seed("roommates", [
        {"id": "r1", "name": "Alex", "email": "alex@example.com", "color": "bg-blue-500",
         "user_id": "user-alex", "status": "registered", "group_id": None},
        {"id": "r2", "name": "Blair", "email": "blair@example.com", "color": "bg-green-500",
         "user_id": None, "status": "invited", "group_id": None},
        {"id": "r3", "name": "Casey", "email": "casey@example.com", "color": "bg-purple-500",
         "user_id": None, "status": "invited", "group_id": None},
    ])

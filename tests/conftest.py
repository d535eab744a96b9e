"""Shared fixtures: stores on a temporary SQLite file and in memory, plus an
API client wired to whichever store a test asks for."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from server import app, get_store
from storage import InMemoryTransactionStore, SqlTransactionStore, TransactionStore


@pytest.fixture
def sql_store(tmp_path: Path) -> SqlTransactionStore:
    # File-backed so every session sees the same database
    return SqlTransactionStore.from_url(f"sqlite:///{tmp_path / 'finance.db'}")


@pytest.fixture(params=["sql", "memory"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> TransactionStore:
    if request.param == "sql":
        return SqlTransactionStore.from_url(f"sqlite:///{tmp_path / 'finance.db'}")
    return InMemoryTransactionStore()


@pytest.fixture
def api(sql_store: SqlTransactionStore):
    app.dependency_overrides[get_store] = lambda: sql_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_store, None)

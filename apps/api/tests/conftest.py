from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from backend_api.core import db
from backend_api.core.db import get_session, init_db
from backend_api.main import app


@pytest.fixture()
def engine(monkeypatch):
    """In-memory database shared by every connection of one test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    monkeypatch.setattr(db, "_engine", eng)
    monkeypatch.delenv("DB_AUTO_CREATE", raising=False)
    yield eng
    eng.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture()
def client(engine):
    def _session_override():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _session_override
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()

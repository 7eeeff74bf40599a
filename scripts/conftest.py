"""Shared fixtures: in-memory SQLite store and an API client with overridden services."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from backend.agents.orchestrator import RecommendationOrchestrator  # noqa: E402
from backend.agents.role_suggester import RoleSuggester  # noqa: E402
from backend.api.app import app  # noqa: E402
from backend.api.deps import get_orchestrator, get_store  # noqa: E402
from backend.db.base import init_db  # noqa: E402
from backend.db.store import JobRoleStore  # noqa: E402


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def store(session_factory):
    return JobRoleStore(session_factory)


@pytest.fixture
def make_client(store):
    """Build a TestClient whose orchestrator uses the given suggest/detail models."""

    def _make(suggest_model=None, detail_model=None, raise_server_exceptions=True):
        suggester = RoleSuggester(suggest_model, detail_model)
        orchestrator = RecommendationOrchestrator(store, suggester)
        app.dependency_overrides[get_store] = lambda: store
        app.dependency_overrides[get_orchestrator] = lambda: orchestrator
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield _make
    app.dependency_overrides.clear()

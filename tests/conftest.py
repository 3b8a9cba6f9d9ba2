"""Shared fixtures: throwaway SQLite databases and an authenticated test client."""

from __future__ import annotations

import asyncio
import os
import sys
import tempfile
import uuid
from pathlib import Path
from types import SimpleNamespace

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# Settings are read at import time, so point them at scratch locations first.
_SCRATCH = Path(tempfile.mkdtemp(prefix="airline-ops-tests-"))
os.environ.setdefault("DB_URL", f"sqlite+aiosqlite:///{_SCRATCH / 'app.db'}")
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("LOG_FILE", str(_SCRATCH / "app.log"))
os.environ.setdefault("AUDIT_LOG_FILE", str(_SCRATCH / "audit.log"))

from app.controllers.dependencies import get_current_user  # noqa: E402
from app.database import create_engine_for, get_session, init_models  # noqa: E402
from app.domain.lifecycle import EntityStatus  # noqa: E402
from app.main import app  # noqa: E402

ADMIN_EMAIL = "ops.admin@example.com"


def _sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest_asyncio.fixture
async def engine(tmp_path: Path):
    test_engine = create_engine_for(_sqlite_url(tmp_path / "lifecycle.db"))
    await init_models(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as db_session:
        yield db_session


def _api_engine(tmp_path: Path):
    test_engine = create_engine_for(_sqlite_url(tmp_path / "api.db"))
    # NullPool: nothing opened on this loop outlives it.
    asyncio.run(init_models(test_engine))
    return test_engine


def _override_session(test_engine) -> None:
    factory = async_sessionmaker(test_engine, expire_on_commit=False, class_=AsyncSession)

    async def override_get_session():
        async with factory() as db_session:
            yield db_session

    app.dependency_overrides[get_session] = override_get_session


@pytest.fixture
def client(tmp_path: Path):
    """Test client whose requests are made by a fixed back-office user."""

    test_engine = _api_engine(tmp_path)
    _override_session(test_engine)

    async def fake_get_current_user():
        return SimpleNamespace(
            id=uuid.uuid4(),
            email=ADMIN_EMAIL,
            status=EntityStatus.ACTIVE,
        )

    app.dependency_overrides[get_current_user] = fake_get_current_user

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    asyncio.run(test_engine.dispose())


@pytest.fixture
def anonymous_client(tmp_path: Path):
    """Test client that goes through real bearer-token authentication."""

    test_engine = _api_engine(tmp_path)
    _override_session(test_engine)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    asyncio.run(test_engine.dispose())

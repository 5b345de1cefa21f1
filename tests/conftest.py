import asyncio
import os
import tempfile

# Settings are read once at import time, so point the app at a throwaway
# SQLite database before anything from `app` is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="vendor-marketplace-tests-")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(_TMP_DIR, "test.db")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"
os.environ["SESSION_COOKIE_SECURE"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.db import async_session, engine
from app.main import app
from app.models import Base


def run(coro):
    return asyncio.run(coro)


async def _reset_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture(autouse=True)
def fresh_db():
    run(_reset_schema())
    yield


@pytest.fixture
def in_db():
    """Run an ``async def scenario(db)`` against a fresh AsyncSession."""

    def _in_db(scenario):
        async def _run():
            async with async_session() as db:
                return await scenario(db)

        return run(_run())

    return _in_db


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def other_client():
    return TestClient(app)


@pytest.fixture
def session_cookie_name():
    return get_settings().session_cookie_name

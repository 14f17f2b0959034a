"""Shared pytest fixtures: a throwaway SQLite catalog per test."""

import asyncio
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bookstore.core.config import Settings
from bookstore.db.session import Database
from bookstore.main import create_app


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}"


@pytest.fixture
def app_settings(db_url: str) -> Settings:
    return Settings(DB_URL=db_url, LOG_DIR=None)


@pytest.fixture
def client(app_settings: Settings):
    """A TestClient whose lifespan creates the tables in the temporary catalog."""
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client


@pytest.fixture
def run_in_catalog(db_url: str):
    """Run ``scenario(session)`` against a fresh catalog and return its result.

    Engine, session and scenario share one event loop, which is closed
    afterwards.
    """

    def _run(scenario):
        async def _main():
            database = Database(db_url)
            await database.init()
            try:
                async with database.session() as session:
                    return await scenario(session)
            finally:
                await database.dispose()

        return asyncio.run(_main())

    return _run

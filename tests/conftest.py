"""Pytest configuration shared by unit and API tests.

Every test gets its own in-memory SQLite database:
1. `engine` builds a fresh StaticPool engine with all tables created
2. `db_session` is a session on that engine for service-level tests
3. `client` is a TestClient whose DB session and settings dependencies are
   overridden, so the application never touches the configured database
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.config import Settings
from app.database import create_tables, get_db_session, make_engine
from app.dependencies import get_app_settings
from app.main import app


TEST_APP_NAME = "libraryApp"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from environment variables and .env files."""
    return Settings(
        _env_file=None,
        client_app_name=TEST_APP_NAME,
        enable_translation=True,
        database_url="sqlite://",
        create_tables_on_startup=False,
        default_page_size=20,
        max_page_size=2000,
    )


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = make_engine("sqlite://")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(
    session_factory: sessionmaker[Session],
    settings: Settings,
) -> Iterator[TestClient]:
    """TestClient bound to the per-test database and settings."""

    def override_get_db_session() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_app_settings] = lambda: settings

    yield TestClient(app)

    app.dependency_overrides.clear()

"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from game_catalog.app import create_app
from game_catalog.core.config import Settings
from game_catalog.db.schema import Base
from tests.catalog_data import seed

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to an empty test database. Tables are removed at teardown to make tests independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def seeded_session(db_session_repo: Session) -> Session:
    """Test database holding the CATALOG rows."""
    seed(db_session_repo)
    return db_session_repo

@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing the static directories at (not yet existing) temporary paths."""
    return Settings(
        database_url=DATABASE_URL,
        rate_limit_max=10_000,
        public_dir=tmp_path / "public",
        game_images_dir=tmp_path / "game images",
        frontend_build_dir=tmp_path / "frontend" / "build",
    )

@pytest.fixture
def app(settings: Settings, seeded_session: Session) -> FastAPI:
    return create_app(settings, engine=engine)

@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)

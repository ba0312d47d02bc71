"""
Fixtures shared by the repository and service tests.

All of them talk to a single in-memory SQLite database: StaticPool hands every session the same connection,
otherwise each session would see its own empty database.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base

IN_MEMORY_URL = "sqlite:///:memory:"
engine = create_engine(
    IN_MEMORY_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def in_memory_settings() -> Settings:
    """Settings pointing to a throwaway database, small board by default to keep games short."""
    return Settings(database_url=IN_MEMORY_URL, default_dimension=4)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Fresh games table for every test: dropped again at teardown."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def db_session_shared() -> Generator[Session, None, None]:
    """Games table kept across tests, like several requests hitting the same database."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

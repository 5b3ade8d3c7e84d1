"""
Pytest will auto-discover / import this file called 'conftest.py'.
Fixtures shared between the test packages: a throwaway sqlite database and a repository on top of it.
"""

from typing import Generator

import pytest
from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.db.sql_repository import SQLGameRepository


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory sqlite, a single connection shared by every session (otherwise each one sees an empty db)."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session_repo(engine: Engine) -> Generator[Session, None, None]:
    """Connection to a fresh test database for every test."""
    with sessionmaker(autoflush=False, bind=engine)() as session:
        yield session


@pytest.fixture
def sql_repository(db_session_repo: Session) -> SQLGameRepository:
    return SQLGameRepository(db_session_repo)

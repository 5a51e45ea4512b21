"""Shared fixtures backed by an in-memory SQLite database."""

from __future__ import annotations

import os
from collections.abc import Generator

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_TIMEZONE", "UTC")

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from notification_center.infrastructure.database import Base, build_engine, initialize_database
from notification_center.infrastructure.repositories import NotificationRepository


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """Return a fresh in-memory database with the notification table created."""

    test_engine = build_engine("sqlite://")
    initialize_database(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def repository(session: Session) -> NotificationRepository:
    return NotificationRepository(session)

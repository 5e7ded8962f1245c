"""Shared fixtures for ledger tests."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.infrastructure.container import LedgerServices
from src.infrastructure.db import (
    SqlAlchemyDatabaseEngineAdapter,
    enable_sqlite_foreign_keys,
)
from src.infrastructure.schema import ensure_schema
from src.infrastructure.settings import LedgerSettings


@pytest.fixture
def ledger_engine():
    """In-memory SQLite engine with the ledger schema."""
    engine = enable_sqlite_foreign_keys(
        create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    )
    ensure_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(ledger_engine):
    return SqlAlchemyDatabaseEngineAdapter(ledger_engine)


@pytest.fixture
def services(db_port):
    """Every use case wired against the in-memory database."""
    settings = LedgerSettings(db_url="sqlite://")
    return LedgerServices(db_port=db_port, settings=settings, logger=MagicMock())

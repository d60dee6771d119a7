"""Shared fixtures for card store tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from cardstore.database import Base, Database
from cardstore.models import CardRow
from cardstore.repositories import CardRepository
from cardstore.schemas import CreateCard


@pytest.fixture
def engine():
    """Create in-memory SQLite engine with the cards table."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine, tables=[CardRow.__table__])
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    """Transaction manager bound to the test engine."""
    return Database(engine)


@pytest.fixture
def repo(db):
    """Card repository under test."""
    return CardRepository(db)


@pytest.fixture
def new_card():
    """Unsaved card for build 1, stage 2, step 3."""
    return CreateCard(build=1, stage=2, step=3, schema="v1", data=b"\x01\x02")


@pytest.fixture
def saved_card(repo, new_card):
    """Card that has already been inserted."""
    repo.create_card(new_card)
    return new_card

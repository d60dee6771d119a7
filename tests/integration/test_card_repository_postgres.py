"""PostgreSQL integration tests for CardRepository.

Run with TEST_DATABASE_URL pointing at a disposable PostgreSQL database.
"""

import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import DBAPIError

from cardstore.database import Base, Database, Dialect
from cardstore.exceptions import NotFoundError
from cardstore.models import CardRow
from cardstore.repositories import CardRepository, queries
from cardstore.schemas import CreateCard

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "")

pytestmark = pytest.mark.skipif(
    not TEST_DATABASE_URL.startswith("postgresql"),
    reason="TEST_DATABASE_URL does not point at PostgreSQL",
)


@pytest.fixture
def pg_repo():
    engine = create_engine(TEST_DATABASE_URL)
    Base.metadata.create_all(engine, tables=[CardRow.__table__])
    database = Database(engine)
    yield CardRepository(database)
    CardRow.__table__.drop(engine)
    database.close()


def test_postgres_card_lifecycle(pg_repo):
    """Create via RETURNING, read back, delete."""
    assert pg_repo._db.dialect is Dialect.POSTGRES

    card = CreateCard(build=1, stage=2, step=3, schema="v1", data=b"\x00\x01\x02")
    pg_repo.create_card(card)
    assert card.id > 0

    assert pg_repo.get_card_by_step(3).id == card.id
    assert [c.id for c in pg_repo.find_cards_by_build(1)] == [card.id]
    assert pg_repo.get_card_data(card.id).read() == b"\x00\x01\x02"

    pg_repo.delete_card(card.id)
    with pytest.raises(NotFoundError):
        pg_repo.get_card_by_step(3)


def test_postgres_view_rejects_writes(pg_repo):
    """Read scopes run in a READ ONLY transaction on PostgreSQL."""
    database = pg_repo._db
    with pytest.raises(DBAPIError):
        with database.view() as conn:
            stmt, args = database.binder.bind(
                queries.INSERT_CARD,
                {
                    "card_build": 1,
                    "card_stage": 1,
                    "card_step": 1,
                    "card_schema": "v1",
                    "card_data": b"",
                },
            )
            conn.exec_driver_sql(stmt, args)

    assert pg_repo.find_cards_by_build(1) == []

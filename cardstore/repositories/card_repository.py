"""Card data access layer.

Each method is one transaction: reads run through
``Database.run_read_only`` and creates and deletes through
``Database.run_write``. Database errors propagate unchanged.
"""

import io
import logging
from collections.abc import Iterable
from typing import Any, BinaryIO, Protocol

from sqlalchemy.engine import Connection, Row

from cardstore.binder import StatementBinder
from cardstore.database import Database
from cardstore.exceptions import NotFoundError
from cardstore.schemas import Card, CardData, CreateCard

from . import queries

logger = logging.getLogger(__name__)


class CardStore(Protocol):
    """Persistence interface for cards."""

    def find_cards_by_build(self, build_id: int) -> list[Card]: ...

    def get_card_by_step(self, step_id: int) -> Card: ...

    def get_card_data(self, card_id: int) -> BinaryIO: ...

    def create_card(self, card: CreateCard) -> None: ...

    def delete_card(self, card_id: int) -> None: ...


class CardRepository:
    """Centralized card data access.

    Naming conventions:
    - find_* : Query that may return None or empty list
    - get_* : Query that raises NotFoundError if missing
    - create_* : Insert new record
    - delete_* : Remove record
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    def find_cards_by_build(self, build_id: int) -> list[Card]:
        """Find all cards belonging to a build. Order is unspecified."""

        def query(conn: Connection, binder: StatementBinder) -> list[Card]:
            stmt, args = binder.bind(queries.QUERY_BY_BUILD, {"card_build": build_id})
            return scan_cards(conn.exec_driver_sql(stmt, args).fetchall())

        return self._db.run_read_only(query)

    def find_card_by_step(self, step_id: int) -> Card | None:
        """Find the card recorded for a step."""

        def query(conn: Connection, binder: StatementBinder) -> Card | None:
            stmt, args = binder.bind(queries.QUERY_BY_STEP, {"card_step": step_id})
            row = conn.exec_driver_sql(stmt, args).first()
            return scan_card(row) if row is not None else None

        return self._db.run_read_only(query)

    def get_card_by_step(self, step_id: int) -> Card:
        """Get the card recorded for a step.

        Raises:
            NotFoundError: If no card exists for the step.
        """
        card = self.find_card_by_step(step_id)
        if card is None:
            raise NotFoundError("Card", step_id)
        return card

    def get_card_data(self, card_id: int) -> BinaryIO:
        """Get a card's payload as a readable stream.

        The payload is fully loaded before the stream is returned.

        Raises:
            NotFoundError: If no card exists with the ID.
        """

        def query(conn: Connection, binder: StatementBinder) -> CardData | None:
            stmt, args = binder.bind(queries.QUERY_DATA_BY_ID, {"card_id": card_id})
            row = conn.exec_driver_sql(stmt, args).first()
            return scan_card_data(row) if row is not None else None

        data = self._db.run_read_only(query)
        if data is None:
            raise NotFoundError("Card", card_id)
        return io.BytesIO(data.data)

    def create_card(self, card: CreateCard) -> None:
        """Insert a card and set ``card.id`` to the generated key.

        IDs are assigned by the database only, so a card that already carries
        one is rejected. ``card.id`` is left untouched if the insert fails.

        Raises:
            ValueError: If ``card.id`` is already set.
        """
        if card.id is not None:
            raise ValueError(f"Card already has id {card.id}")

        template = queries.INSERT_STATEMENTS.get(self._db.dialect, queries.INSERT_CARD)
        returning = self._db.dialect.supports_returning

        def insert(conn: Connection, binder: StatementBinder) -> int:
            stmt, args = binder.bind(template, card_params(card))
            result = conn.exec_driver_sql(stmt, args)
            return result.scalar_one() if returning else result.lastrowid

        card.id = int(self._db.run_write(insert))
        logger.debug(f"Created card {card.id} for build {card.build}, step {card.step}")

    def delete_card(self, card_id: int) -> None:
        """Delete a card by ID. Deleting a missing card is not an error."""

        def delete(conn: Connection, binder: StatementBinder) -> None:
            stmt, args = binder.bind(queries.DELETE_CARD, {"card_id": card_id})
            conn.exec_driver_sql(stmt, args)

        self._db.run_write(delete)
        logger.debug(f"Deleted card {card_id}")


# ------------------------------------------------------------------
# Parameter and row helpers
# ------------------------------------------------------------------


def card_params(card: CreateCard) -> dict[str, Any]:
    """Named parameters for inserting ``card``."""
    return {
        "card_build": card.build,
        "card_stage": card.stage,
        "card_step": card.step,
        "card_schema": card.card_schema,
        "card_data": card.data,
    }


def scan_card(row: Row) -> Card:
    return Card(
        id=row.card_id,
        build=row.card_build,
        stage=row.card_stage,
        step=row.card_step,
        schema=row.card_schema,
    )


def scan_cards(rows: Iterable[Row]) -> list[Card]:
    return [scan_card(row) for row in rows]


def scan_card_data(row: Row) -> CardData:
    # psycopg2 returns bytea columns as memoryview
    data = row.card_data
    return CardData(data=bytes(data) if data is not None else b"")

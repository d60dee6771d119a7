"""Card table model."""

from sqlalchemy import BigInteger, Index, Integer, LargeBinary, String
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import Mapped, mapped_column

from cardstore.database import Base

# SQLite only autoincrements an INTEGER PRIMARY KEY (the rowid alias)
CardId = BigInteger().with_variant(Integer, "sqlite")

# MySQL BLOB stops at 64 KB
CardPayload = LargeBinary().with_variant(mysql.LONGBLOB, "mysql", "mariadb")


class CardRow(Base):
    """Recorded output of one pipeline step: metadata plus opaque payload.

    Rows are written and read with raw SQL by ``CardRepository``; the model
    exists so the table can be created from ``Base.metadata``.
    """

    __tablename__ = "cards"
    __table_args__ = (
        Index("ix_cards_build", "card_build"),
        Index("ix_cards_step", "card_step"),
        # IDs of deleted cards are never handed out again
        {"sqlite_autoincrement": True},
    )

    card_id: Mapped[int] = mapped_column(CardId, primary_key=True, autoincrement=True)
    card_build: Mapped[int] = mapped_column(BigInteger)
    card_stage: Mapped[int] = mapped_column(BigInteger)
    card_step: Mapped[int] = mapped_column(BigInteger)
    card_schema: Mapped[str] = mapped_column(String(2000))
    card_data: Mapped[bytes | None] = mapped_column(CardPayload)

    def __repr__(self) -> str:
        return f"<CardRow(card_id={self.card_id}, card_build={self.card_build}, card_step={self.card_step})>"

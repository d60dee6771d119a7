"""SQLAlchemy ORM models."""

from cardstore.models.card import CardRow

__all__ = [
    "CardRow",
]

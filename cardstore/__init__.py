"""Transactional storage for pipeline step cards."""

from cardstore.database import Database, Dialect
from cardstore.repositories import CardRepository, CardStore, NotFoundError
from cardstore.schemas import Card, CardData, CreateCard

__all__ = [
    "Card",
    "CardData",
    "CardRepository",
    "CardStore",
    "CreateCard",
    "Database",
    "Dialect",
    "NotFoundError",
]

__version__ = "0.1.0"

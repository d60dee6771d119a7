"""Pydantic schemas."""

from cardstore.schemas.card import Card, CardData, CreateCard

__all__ = [
    "Card",
    "CardData",
    "CreateCard",
]

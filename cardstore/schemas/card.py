"""Pydantic schemas for cards."""

from pydantic import BaseModel, ConfigDict, Field


class CardBase(BaseModel):
    """Fields shared by stored cards and create requests."""

    model_config = ConfigDict(populate_by_name=True)

    build: int = Field(..., description="Owning build ID")
    stage: int = Field(..., description="Owning stage ID within the build")
    step: int = Field(..., description="Owning step ID within the stage")
    card_schema: str = Field(..., alias="schema", description="Shape/version of the payload")


class Card(CardBase):
    """Card metadata. Never carries the payload."""

    id: int


class CardData(BaseModel):
    """Card payload. Never carries metadata."""

    data: bytes


class CreateCard(CardBase):
    """Schema for creating a card.

    ``id`` is set only by the repository once the row has been inserted;
    creating a card that already carries one is rejected.
    """

    data: bytes = b""
    id: int | None = Field(default=None, exclude=True, description="Database-generated ID")

"""Item Schemas: Pydantic models for item and sell endpoints.

Invariants:
    - ItemWrite carries every mutable field: PUT is a full replace, omitted
      optional fields fall back to their defaults
    - Types and whitespace checked here; domain ranges checked by core/validate_fields
      so direct store callers get the same rules

Design Decisions:
    - category typed as str, not ItemCategory: the domain check owns the error
      message listing allowed values
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from artisan.schemas.base import CamelModel


class ItemWrite(CamelModel):
    """Create or fully replace an item."""
    name: str = Field(max_length=200)
    category: str
    description: str = Field("", max_length=5000)
    color: str = Field("", max_length=100)
    price: float = Field(allow_inf_nan=False)
    quantity: int
    next_import: bool = False

    @field_validator("name", "category", "description", "color")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class ItemResponse(CamelModel):
    id: UUID
    name: str
    category: str
    description: str
    color: str
    price: float
    quantity: int
    next_import: bool
    date_added: datetime


class SellRequest(CamelModel):
    """Body of POST /items/{id}/sell. Empty fairId means no ledger entry."""
    fair_id: str | None = None

    @field_validator("fair_id")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class SellResponse(CamelModel):
    message: str
    item: ItemResponse
    remaining_quantity: int


class ImportClearResponse(CamelModel):
    message: str
    cleared_count: int


class MessageResponse(CamelModel):
    message: str

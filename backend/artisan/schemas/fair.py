"""Fair Schemas: Pydantic models for fair, ledger and aggregation endpoints.

Invariants:
    - FairWrite has no active field: activation goes through start/end only
    - SaleResponse exposes the snapshot fields, never a live item lookup
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field, field_validator

from artisan.schemas.base import CamelModel


class FairWrite(CamelModel):
    """Create or fully replace a fair's descriptive fields."""
    name: str = Field(max_length=200)
    city: str = Field(max_length=200)
    start_date: date
    end_date: date

    @field_validator("name", "city")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class FairResponse(CamelModel):
    id: UUID
    name: str
    city: str
    start_date: date
    end_date: date
    active: bool
    created_at: datetime


class FairActionResponse(CamelModel):
    """Result of start/end: the fair in its new state."""
    message: str
    fair: FairResponse


class FairDeleteResponse(CamelModel):
    message: str
    deleted_sales: int


class SaleResponse(CamelModel):
    id: int
    item_id: UUID
    fair_id: UUID
    item_name: str
    category: str
    price: float
    sale_date: datetime


class FairTotalResponse(CamelModel):
    total: float


class CategoryTotal(CamelModel):
    count: int
    total: float


class FairSummaryResponse(CamelModel):
    sale_count: int
    total: float
    by_category: dict[str, CategoryTotal]

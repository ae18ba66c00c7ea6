"""Boundary Protocols: contracts between orchestration and the record stores.

Invariants:
    - Core NEVER imports from services/, models/ or db/; dependency arrows point inward only
    - Store methods flush but never commit; the caller owns the transaction
    - Implementations provided by services/ via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
      (ADR: no inheritance hierarchy)
    - Records typed as structural Protocols (ItemLike, FairLike): core stays ORM-agnostic
"""

from datetime import date, datetime
from typing import Protocol
from uuid import UUID


class ItemLike(Protocol):
    """Structural contract for Item records."""
    id: UUID
    name: str
    category: str
    price: float
    quantity: int
    next_import: bool


class FairLike(Protocol):
    """Structural contract for Fair records."""
    id: UUID
    name: str
    city: str
    start_date: date
    end_date: date
    active: bool


class SaleLike(Protocol):
    """Structural contract for SaleRecord entries."""
    id: int
    item_id: UUID
    fair_id: UUID
    item_name: str
    category: str
    price: float
    sale_date: datetime


class ItemRepository(Protocol):
    """Contract for item persistence."""
    async def get(self, item_id: object) -> ItemLike: ...
    async def decrement_stock(self, item_id: object) -> ItemLike: ...
    async def list_flagged_for_import(self) -> list[ItemLike]: ...
    async def clear_import_flags(self) -> int: ...


class FairRepository(Protocol):
    """Contract for fair persistence."""
    async def get(self, fair_id: object) -> FairLike: ...
    async def get_active(self) -> FairLike | None: ...
    async def start(self, fair_id: object) -> FairLike: ...
    async def end_active(self) -> FairLike: ...


class SaleRepository(Protocol):
    """Contract for the append-only sale ledger."""
    async def append(self, item: ItemLike, fair_id: UUID) -> SaleLike: ...
    async def list_by_fair(self, fair_id: UUID) -> list[SaleLike]: ...
    async def total_for_fair(self, fair_id: UUID) -> float: ...

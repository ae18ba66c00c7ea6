"""Inventory Operations: orchestration of the item, fair and ledger stores.

Invariants:
    - Every mutating operation runs in exactly one transaction (infrastructure.database.transaction)
    - sell(): decrement and ledger append commit together or not at all; a failed
      append rolls the decrement back
    - sell() on quantity 0 raises OutOfStockError and changes nothing
    - get_fair_total() is the exact SUM(price) of the fair's sales, 0 when none

Design Decisions:
    - Stores injected (defaults built from the session): tests swap a store without
      patching module globals (ADR: no process-wide singleton stores)
    - Item looked up before the fair: a missing item is reported even if fairId is also bad
    - Read-only operations skip transaction(): nothing to commit
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from artisan.core.fair_totals import summarize_fair_sales
from artisan.core.repository_protocols import (
    ItemRepository, FairRepository, SaleRepository,
)
from artisan.infrastructure.database import transaction
from artisan.models.fair import Fair
from artisan.models.item import Item
from artisan.models.sale import SaleRecord
from artisan.services.fair_store import FairStore
from artisan.services.item_store import ItemStore
from artisan.services.sale_ledger import SaleLedger

logger = logging.getLogger(__name__)


class InventoryOperations:
    """Use cases that span more than one store."""

    def __init__(
        self,
        db: AsyncSession,
        items: ItemRepository | None = None,
        fairs: FairRepository | None = None,
        ledger: SaleRepository | None = None,
    ):
        self.db = db
        self.ledger = ledger or SaleLedger(db)
        self.items = items or ItemStore(db)
        self.fairs = fairs or FairStore(db, self.ledger)

    # ─── Selling ─────────────────────────────────────────────────

    async def sell(
        self, item_id: object, fair_id: object | None = None,
    ) -> tuple[Item, int]:
        """Sell one unit. With a fair_id, also append a ledger entry."""
        async with transaction(self.db):
            item = await self.items.decrement_stock(item_id)
            if fair_id is not None:
                fair = await self.fairs.get(fair_id)
                await self.ledger.append(item, fair.id)

        logger.info(
            f"Item sold: {item.name}, remaining quantity: {item.quantity}",
            extra={
                "item_id": str(item.id),
                "fair_id": str(fair_id) if fair_id is not None else None,
                "remaining_quantity": item.quantity,
            },
        )
        return item, item.quantity

    # ─── Fair lifecycle ──────────────────────────────────────────

    async def start_fair(self, fair_id: object) -> Fair:
        async with transaction(self.db):
            return await self.fairs.start(fair_id)

    async def end_fair(self) -> Fair:
        async with transaction(self.db):
            return await self.fairs.end_active()

    async def get_active_fair(self) -> Fair | None:
        return await self.fairs.get_active()

    # ─── Aggregation ─────────────────────────────────────────────

    async def get_fair_total(self, fair_id: object) -> float:
        return await self.ledger.total_for_fair(fair_id)

    async def get_fair_sales(self, fair_id: object) -> list[SaleRecord]:
        return await self.ledger.list_by_fair(fair_id)

    async def get_fair_summary(self, fair_id: object) -> dict:
        """Count, total and per-category breakdown of a fair's ledger."""
        sales = await self.ledger.list_by_fair(fair_id)
        return summarize_fair_sales(sales)

    # ─── Import list ─────────────────────────────────────────────

    async def get_import_list(self) -> list[Item]:
        return await self.items.list_flagged_for_import()

    async def clear_import_list(self) -> int:
        """Unflag every item marked for import. Returns how many were cleared."""
        async with transaction(self.db):
            cleared = await self.items.clear_import_flags()
        logger.info(
            f"Cleared import flags from {cleared} items",
            extra={"cleared_count": cleared},
        )
        return cleared

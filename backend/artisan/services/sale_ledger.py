"""Sale Ledger: append-only record of completed sales, one row per unit sold.

Invariants:
    - append() is the only mutation on individual records; rows are never updated
    - list_by_fair() returns only that fair's rows, sale_date DESC, ties by insertion order
    - delete_by_fair() exists solely for FairStore's cascade delete
    - total_for_fair() is 0 for a fair with no sales (not an error)

Design Decisions:
    - Snapshot item name/category/price at append time: rows stay meaningful after
      the item is edited or deleted (ADR: weak reference by id)
    - Aggregation pushed to SQL (SUM): totals never load the whole ledger
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from artisan.core.domain_types import parse_id
from artisan.core.repository_protocols import ItemLike
from artisan.models.sale import SaleRecord

logger = logging.getLogger(__name__)


class SaleLedger:
    """Append-only persistence for SaleRecord entries."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def append(self, item: ItemLike, fair_id: UUID) -> SaleRecord:
        """Record one sold unit of item during fair_id."""
        sale = SaleRecord(
            item_id=item.id,
            fair_id=fair_id,
            item_name=item.name,
            category=item.category,
            price=item.price,
            sale_date=datetime.now(timezone.utc),
        )
        self.db.add(sale)
        await self.db.flush()
        logger.info(
            f"Sale recorded: {item.name} for {item.price:.2f}",
            extra={"item_id": str(item.id), "fair_id": str(fair_id)},
        )
        return sale

    async def list_by_fair(self, fair_id: object) -> list[SaleRecord]:
        uid = parse_id(fair_id)
        if uid is None:
            return []
        result = await self.db.execute(
            select(SaleRecord)
            .where(SaleRecord.fair_id == uid)
            .order_by(SaleRecord.sale_date.desc(), SaleRecord.id.asc())
        )
        return list(result.scalars().all())

    async def total_for_fair(self, fair_id: object) -> float:
        uid = parse_id(fair_id)
        if uid is None:
            return 0.0
        result = await self.db.execute(
            select(func.coalesce(func.sum(SaleRecord.price), 0.0))
            .where(SaleRecord.fair_id == uid)
        )
        return float(result.scalar_one())

    async def delete_by_fair(self, fair_id: UUID) -> int:
        """Bulk-delete a fair's records. Only FairStore.delete calls this."""
        result = await self.db.execute(
            delete(SaleRecord)
            .where(SaleRecord.fair_id == fair_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

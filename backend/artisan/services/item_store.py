"""Item Store: owns item records (CRUD, stock decrement, import flags).

Invariants:
    - Every create/update passes check_item_fields before touching the session
    - quantity never goes negative: decrement is a single conditional UPDATE
      (WHERE quantity > 0), so two overlapping sells cannot both take the last unit
    - Methods flush, never commit; the caller owns the transaction
    - Unknown or unparseable ids raise NotFoundError

Design Decisions:
    - Conditional UPDATE over SELECT ... FOR UPDATE: one round trip, works on SQLite
      and PostgreSQL alike (ADR: per-record atomic read-modify-write)
    - clear_import_flags loads then unflags in one flush (executemany): the session
      stays in sync with the rows it reports as cleared
"""

import logging

from sqlalchemy import select, update, or_, func
from sqlalchemy.ext.asyncio import AsyncSession

from artisan.core.domain_types import parse_id
from artisan.core.errors import NotFoundError, OutOfStockError, ErrorContext
from artisan.core.validate_fields import check_item_fields
from artisan.models.item import Item

logger = logging.getLogger(__name__)


class ItemStore:
    """Persistence for Item records."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_items(
        self,
        search: str | None = None,
        category: str | None = None,
        newest_first: bool = True,
    ) -> list[Item]:
        """List items. search is a case-insensitive literal substring of name or description."""
        query = select(Item)
        if category:
            query = query.where(Item.category == category)
        if search and search.strip():
            term = search.strip().lower()
            query = query.where(or_(
                func.lower(Item.name).contains(term, autoescape=True),
                func.lower(Item.description).contains(term, autoescape=True),
            ))
        order = Item.date_added.desc() if newest_first else Item.date_added.asc()
        result = await self.db.execute(query.order_by(order))
        return list(result.scalars().all())

    async def get(self, item_id: object, refresh: bool = False) -> Item:
        uid = parse_id(item_id)
        item = (
            await self.db.get(Item, uid, populate_existing=refresh)
            if uid else None
        )
        if item is None:
            raise NotFoundError(
                "Item", str(item_id), ErrorContext(item_id=str(item_id)),
            )
        return item

    async def create(
        self,
        *,
        name: str,
        category: str,
        price: float,
        quantity: int,
        description: str = "",
        color: str = "",
        next_import: bool = False,
    ) -> Item:
        fields = check_item_fields(name, category, price, quantity)
        item = Item(
            **fields,
            description=description or "",
            color=color or "",
            next_import=next_import,
        )
        self.db.add(item)
        await self.db.flush()
        logger.info(f"Item created: {item.name}", extra={"item_id": str(item.id)})
        return item

    async def update(
        self,
        item_id: object,
        *,
        name: str,
        category: str,
        price: float,
        quantity: int,
        description: str = "",
        color: str = "",
        next_import: bool = False,
    ) -> Item:
        """Full replace of every mutable field."""
        item = await self.get(item_id)
        fields = check_item_fields(name, category, price, quantity)
        for key, value in fields.items():
            setattr(item, key, value)
        item.description = description or ""
        item.color = color or ""
        item.next_import = next_import
        await self.db.flush()
        logger.info(f"Item updated: {item.name}", extra={"item_id": str(item.id)})
        return item

    async def delete(self, item_id: object) -> Item:
        """Delete an item. Sale records keep their own snapshot and are untouched."""
        item = await self.get(item_id)
        await self.db.delete(item)
        await self.db.flush()
        logger.info(f"Item deleted: {item.name}", extra={"item_id": str(item.id)})
        return item

    async def decrement_stock(self, item_id: object) -> Item:
        """Take exactly one unit out of stock. Raises OutOfStockError at zero."""
        item = await self.get(item_id, refresh=True)
        ctx = ErrorContext(item_id=str(item.id))
        if item.quantity <= 0:
            raise OutOfStockError(item.name, ctx)

        result = await self.db.execute(
            update(Item)
            .where(Item.id == item.id)
            .where(Item.quantity > 0)
            .values(quantity=Item.quantity - 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            # another sell took the last unit between our read and write
            raise OutOfStockError(item.name, ctx)

        await self.db.refresh(item)
        return item

    async def list_flagged_for_import(self) -> list[Item]:
        result = await self.db.execute(
            select(Item)
            .where(Item.next_import.is_(True))
            .order_by(Item.date_added.desc())
        )
        return list(result.scalars().all())

    async def clear_import_flags(self) -> int:
        """Unset next_import on every flagged item in one flush. Returns count changed."""
        flagged = await self.list_flagged_for_import()
        for item in flagged:
            item.next_import = False
        await self.db.flush()
        return len(flagged)

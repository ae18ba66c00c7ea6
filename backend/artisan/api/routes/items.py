"""Item Routes: CRUD, import list and sell endpoints under /api/items.

Invariants:
    - Static paths (/import/list, /import/clear) registered before /{item_id}
    - Every write wrapped in transaction(): one request, one commit
    - Routes never contain business logic (delegate to ItemStore / InventoryOperations)
    - Domain errors propagate to the global handlers (api/error_handlers.py)
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from artisan.core.domain_types import ItemCategory
from artisan.infrastructure.database import get_db, transaction
from artisan.schemas.item import (
    ItemWrite, ItemResponse, SellRequest, SellResponse,
    ImportClearResponse, MessageResponse,
)
from artisan.services.inventory_operations import InventoryOperations
from artisan.services.item_store import ItemStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=list[ItemResponse])
async def list_items(
    search: str | None = Query(None, max_length=200),
    category: ItemCategory | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List items, newest first."""
    items = await ItemStore(db).list_items(
        search=search, category=category.value if category else None,
    )
    return [ItemResponse.model_validate(i) for i in items]


@router.get("/import/list", response_model=list[ItemResponse])
async def get_import_list(db: AsyncSession = Depends(get_db)):
    """Items flagged for the next restock import."""
    items = await InventoryOperations(db).get_import_list()
    logger.info(f"Found {len(items)} items marked for import")
    return [ItemResponse.model_validate(i) for i in items]


@router.post("/import/clear", response_model=ImportClearResponse)
async def clear_import_list(db: AsyncSession = Depends(get_db)):
    cleared = await InventoryOperations(db).clear_import_list()
    return ImportClearResponse(
        message="Import list cleared successfully", cleared_count=cleared,
    )


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(item_id: str, db: AsyncSession = Depends(get_db)):
    item = await ItemStore(db).get(item_id)
    return ItemResponse.model_validate(item)


@router.post(
    "", response_model=ItemResponse, status_code=status.HTTP_201_CREATED,
)
async def create_item(body: ItemWrite, db: AsyncSession = Depends(get_db)):
    async with transaction(db):
        item = await ItemStore(db).create(**body.model_dump())
    return ItemResponse.model_validate(item)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: str, body: ItemWrite, db: AsyncSession = Depends(get_db),
):
    """Full replace of the item's mutable fields."""
    async with transaction(db):
        item = await ItemStore(db).update(item_id, **body.model_dump())
    return ItemResponse.model_validate(item)


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_item(item_id: str, db: AsyncSession = Depends(get_db)):
    async with transaction(db):
        await ItemStore(db).delete(item_id)
    return MessageResponse(message="Item deleted successfully")


@router.post("/{item_id}/sell", response_model=SellResponse)
async def sell_item(
    item_id: str,
    body: SellRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Sell one unit; with fairId, record it in that fair's ledger."""
    fair_id = body.fair_id if body else None
    item, remaining = await InventoryOperations(db).sell(item_id, fair_id)
    return SellResponse(
        message="Item sold successfully",
        item=ItemResponse.model_validate(item),
        remaining_quantity=remaining,
    )

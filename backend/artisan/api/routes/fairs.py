"""Fair Routes: CRUD, activation and per-fair ledger endpoints under /api/fairs.

Invariants:
    - /end and /active/current registered before /{fair_id}
    - GET /active/current returns null (not 404) when no fair is active
    - POST /end returns 404 when no fair is active
    - Ledger reads (sales, total, summary) do not require the fair to still exist:
      a deleted fair simply has an empty ledger
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from artisan.infrastructure.database import get_db, transaction
from artisan.schemas.fair import (
    FairWrite, FairResponse, FairActionResponse, FairDeleteResponse,
    SaleResponse, FairTotalResponse, FairSummaryResponse,
)
from artisan.services.fair_store import FairStore
from artisan.services.inventory_operations import InventoryOperations

router = APIRouter(prefix="/api/fairs", tags=["fairs"])


@router.get("", response_model=list[FairResponse])
async def list_fairs(db: AsyncSession = Depends(get_db)):
    """List fairs, most recently created first."""
    fairs = await FairStore(db).list_fairs()
    return [FairResponse.model_validate(f) for f in fairs]


@router.post("/end", response_model=FairActionResponse)
async def end_fair(db: AsyncSession = Depends(get_db)):
    fair = await InventoryOperations(db).end_fair()
    return FairActionResponse(
        message="Fair ended successfully",
        fair=FairResponse.model_validate(fair),
    )


@router.get("/active/current", response_model=FairResponse | None)
async def get_active_fair(db: AsyncSession = Depends(get_db)):
    fair = await InventoryOperations(db).get_active_fair()
    return FairResponse.model_validate(fair) if fair else None


@router.get("/{fair_id}", response_model=FairResponse)
async def get_fair(fair_id: str, db: AsyncSession = Depends(get_db)):
    fair = await FairStore(db).get(fair_id)
    return FairResponse.model_validate(fair)


@router.post(
    "", response_model=FairResponse, status_code=status.HTTP_201_CREATED,
)
async def create_fair(body: FairWrite, db: AsyncSession = Depends(get_db)):
    """Create a fair. New fairs are always inactive."""
    async with transaction(db):
        fair = await FairStore(db).create(**body.model_dump())
    return FairResponse.model_validate(fair)


@router.put("/{fair_id}", response_model=FairResponse)
async def update_fair(
    fair_id: str, body: FairWrite, db: AsyncSession = Depends(get_db),
):
    async with transaction(db):
        fair = await FairStore(db).update(fair_id, **body.model_dump())
    return FairResponse.model_validate(fair)


@router.delete("/{fair_id}", response_model=FairDeleteResponse)
async def delete_fair(fair_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a fair together with its sales."""
    async with transaction(db):
        deleted_sales = await FairStore(db).delete(fair_id)
    return FairDeleteResponse(
        message="Fair and associated sales deleted successfully",
        deleted_sales=deleted_sales,
    )


@router.post("/{fair_id}/start", response_model=FairActionResponse)
async def start_fair(fair_id: str, db: AsyncSession = Depends(get_db)):
    """Activate this fair; any other active fair is deactivated."""
    fair = await InventoryOperations(db).start_fair(fair_id)
    return FairActionResponse(
        message="Fair started successfully",
        fair=FairResponse.model_validate(fair),
    )


@router.get("/{fair_id}/sales", response_model=list[SaleResponse])
async def get_fair_sales(fair_id: str, db: AsyncSession = Depends(get_db)):
    """Ledger for a fair, newest first."""
    sales = await InventoryOperations(db).get_fair_sales(fair_id)
    return [SaleResponse.model_validate(s) for s in sales]


@router.get("/{fair_id}/total", response_model=FairTotalResponse)
async def get_fair_total(fair_id: str, db: AsyncSession = Depends(get_db)):
    total = await InventoryOperations(db).get_fair_total(fair_id)
    return FairTotalResponse(total=total)


@router.get("/{fair_id}/summary", response_model=FairSummaryResponse)
async def get_fair_summary(fair_id: str, db: AsyncSession = Depends(get_db)):
    summary = await InventoryOperations(db).get_fair_summary(fair_id)
    return FairSummaryResponse.model_validate(summary)

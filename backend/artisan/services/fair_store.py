"""Fair Store: owns fair records and the at-most-one-active-fair invariant.

Invariants:
    - At most one fair has active = true at any observation point
    - start() deactivates every other active fair, then activates the target, in one transaction
    - end_active() raises NotFoundError when no fair is active
    - delete() removes the fair's sale records in the same transaction
    - update() never touches active: only start/end/delete change it

Design Decisions:
    - Two UPDATE statements inside the caller's transaction: readers never see zero
      active fairs mid-start because nothing is committed in between
    - IntegrityError from uq_fairs_single_active mapped to ConflictError: a concurrent
      start committed first and the loser must re-read (ADR: no silent retry in core)
    - Methods flush, never commit; the caller owns the transaction
"""

import logging
from datetime import date

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from artisan.core.domain_types import parse_id
from artisan.core.errors import ConflictError, NotFoundError, ErrorContext
from artisan.core.validate_fields import check_fair_fields
from artisan.models.fair import Fair
from artisan.services.sale_ledger import SaleLedger

logger = logging.getLogger(__name__)


class FairStore:
    """Persistence and activation rules for Fair records."""

    def __init__(self, db: AsyncSession, ledger: SaleLedger | None = None):
        self.db = db
        self.ledger = ledger or SaleLedger(db)

    async def list_fairs(self) -> list[Fair]:
        result = await self.db.execute(
            select(Fair).order_by(Fair.created_at.desc()),
        )
        return list(result.scalars().all())

    async def get(self, fair_id: object) -> Fair:
        uid = parse_id(fair_id)
        fair = await self.db.get(Fair, uid) if uid else None
        if fair is None:
            raise NotFoundError(
                "Fair", str(fair_id), ErrorContext(fair_id=str(fair_id)),
            )
        return fair

    async def create(
        self, *, name: str, city: str, start_date: date, end_date: date,
    ) -> Fair:
        """Create an inactive fair."""
        fields = check_fair_fields(name, city, start_date, end_date)
        fair = Fair(**fields, active=False)
        self.db.add(fair)
        await self.db.flush()
        logger.info(f"Fair created: {fair.name}", extra={"fair_id": str(fair.id)})
        return fair

    async def update(
        self, fair_id: object, *,
        name: str, city: str, start_date: date, end_date: date,
    ) -> Fair:
        fair = await self.get(fair_id)
        fields = check_fair_fields(name, city, start_date, end_date)
        for key, value in fields.items():
            setattr(fair, key, value)
        await self.db.flush()
        return fair

    async def delete(self, fair_id: object) -> int:
        """Delete a fair and its ledger. Returns the number of sales removed."""
        fair = await self.get(fair_id)
        deleted_sales = await self.ledger.delete_by_fair(fair.id)
        await self.db.delete(fair)
        await self.db.flush()
        logger.info(
            f"Fair deleted: {fair.name}",
            extra={"fair_id": str(fair.id), "deleted_sales": deleted_sales},
        )
        return deleted_sales

    async def get_active(self) -> Fair | None:
        result = await self.db.execute(
            select(Fair).where(Fair.active.is_(True)),
        )
        active = list(result.scalars().all())
        if len(active) > 1:
            raise ConflictError(
                f"{len(active)} fairs are marked active; expected at most one",
            )
        return active[0] if active else None

    async def start(self, fair_id: object) -> Fair:
        """Make fair_id the only active fair."""
        fair = await self.get(fair_id)
        try:
            await self.db.execute(
                update(Fair)
                .where(Fair.active.is_(True))
                .where(Fair.id != fair.id)
                .values(active=False)
                .execution_options(synchronize_session="fetch")
            )
            await self.db.execute(
                update(Fair)
                .where(Fair.id == fair.id)
                .values(active=True)
                .execution_options(synchronize_session="fetch")
            )
        except IntegrityError as e:
            raise ConflictError(
                "Another fair was started concurrently; reload and retry",
                ErrorContext(fair_id=str(fair.id)),
            ) from e
        await self.db.refresh(fair)
        logger.info(f"Fair started: {fair.name}", extra={"fair_id": str(fair.id)})
        return fair

    async def end_active(self) -> Fair:
        """Deactivate the active fair. NotFoundError if there is none."""
        fair = await self.get_active()
        if fair is None:
            raise NotFoundError("Active fair")
        fair.active = False
        await self.db.flush()
        logger.info(f"Fair ended: {fair.name}", extra={"fair_id": str(fair.id)})
        return fair

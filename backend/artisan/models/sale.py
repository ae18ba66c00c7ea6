"""SaleRecord ORM: one immutable ledger entry per unit sold during a fair.

Invariants:
    - fair_id is required: a sale cannot exist outside a fair
    - item_id is a weak reference (no FK): survives item deletion
    - item_name/category/price are snapshots taken at sale time
    - Never updated; created by SaleLedger.append, removed only with its fair

Design Decisions:
    - Integer autoincrement id: doubles as insertion order for sale_date ties
    - Indexed (fair_id, sale_date): list_by_fair and total_for_fair are per-fair scans
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, Float, Integer, DateTime, ForeignKey, Index,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from artisan.db.base import Base


class SaleRecord(Base):
    """Ledger entry: denormalized snapshot of one sold unit."""
    __tablename__ = "sales"
    __table_args__ = (
        Index("ix_sales_fair_id_sale_date", "fair_id", "sale_date"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    item_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    fair_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("fairs.id", ondelete="CASCADE"),
        nullable=False,
    )
    item_name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    sale_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

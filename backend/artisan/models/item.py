"""Item ORM: persists one inventory line (a handmade product and its stock count).

Invariants:
    - id is UUID primary key (client-side default)
    - quantity >= 0 and price >= 0 enforced by CHECK constraints
    - category is one of ItemCategory values (validated before write)
    - quantity changes only through sell (decrement_stock) and full update

Design Decisions:
    - No relationship to SaleRecord: the ledger keeps a denormalized snapshot,
      so deleting an item never touches sales (ADR: weak reference by id)
    - Float price: single currency, cent rounding done at presentation
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, Text, Integer, Float, Boolean, DateTime, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from artisan.db.base import Base


class Item(Base):
    """Inventory item with price and remaining stock."""
    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="quantity_non_negative"),
        CheckConstraint("price >= 0", name="price_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    color: Mapped[str] = mapped_column(
        String(100), nullable=False, default="",
    )
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    next_import: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    date_added: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

"""Fair ORM: persists a bounded selling event.

Invariants:
    - end_date >= start_date (CHECK constraint + validate_fields)
    - At most one row has active = true: partial unique index uq_fairs_single_active
    - Created inactive; active flips only through FairStore.start/end_active
    - Deleting a fair cascades to its sale records (explicit ledger delete in the same transaction, plus ON DELETE CASCADE)

Design Decisions:
    - Partial unique index over an app-level lock: the database rejects a second
      active row even under concurrent starts (ADR: ConflictError escape hatch)
    - Dates are descriptive metadata only: nothing auto-activates a fair
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import (
    String, Boolean, Date, DateTime, CheckConstraint, Index, text,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from artisan.db.base import Base


class Fair(Base):
    """Fair entity: a selling period with an active flag."""
    __tablename__ = "fairs"
    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="date_range_ordered"),
        Index(
            "uq_fairs_single_active", "active", unique=True,
            postgresql_where=text("active IS TRUE"),
            sqlite_where=text("active = 1"),
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    city: Mapped[str] = mapped_column(String(200), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

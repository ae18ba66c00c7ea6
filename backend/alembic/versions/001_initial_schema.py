"""Initial schema: items, fairs, sales.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

fairs.uq_fairs_single_active is a partial unique index: at most one row may
have active = true. sales.fair_id cascades on fair delete; sales.item_id is
deliberately not a foreign key (ledger rows outlive their item).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "items",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("color", sa.String(100), nullable=False, server_default=""),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.Column("next_import", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("date_added", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("quantity >= 0", name=op.f("ck_items_quantity_non_negative")),
        sa.CheckConstraint("price >= 0", name=op.f("ck_items_price_non_negative")),
    )

    op.create_table(
        "fairs",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("city", sa.String(200), nullable=False),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=False),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("end_date >= start_date", name=op.f("ck_fairs_date_range_ordered")),
    )
    op.create_index(
        "uq_fairs_single_active", "fairs", ["active"], unique=True,
        postgresql_where=sa.text("active IS TRUE"),
        sqlite_where=sa.text("active = 1"),
    )

    op.create_table(
        "sales",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("item_id", UUID(as_uuid=True), nullable=False),
        sa.Column(
            "fair_id", UUID(as_uuid=True),
            sa.ForeignKey("fairs.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("item_name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("sale_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_sales_fair_id_sale_date", "sales", ["fair_id", "sale_date"])


def downgrade() -> None:
    op.drop_index("ix_sales_fair_id_sale_date", table_name="sales")
    op.drop_table("sales")
    op.drop_index("uq_fairs_single_active", table_name="fairs")
    op.drop_table("fairs")
    op.drop_table("items")

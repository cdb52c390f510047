"""initial procurement schema

Revision ID: 3f2a9c1d7e45
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e45"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# sqlite only autoincrements INTEGER PRIMARY KEY
ID = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", ID, primary_key=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default="user"),
        *_timestamps(),
    )
    op.create_index("ix_users_deleted_at", "users", ["deleted_at"])

    op.create_table(
        "suppliers",
        sa.Column("id", ID, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(100), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_suppliers_deleted_at", "suppliers", ["deleted_at"])

    op.create_table(
        "items",
        sa.Column("id", ID, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("stock", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("price", sa.Float(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.CheckConstraint("stock >= 0", name="ck_item_stock_nonneg"),
        sa.CheckConstraint("price >= 0", name="ck_item_price_nonneg"),
    )
    op.create_index("ix_items_deleted_at", "items", ["deleted_at"])

    op.create_table(
        "purchasings",
        sa.Column("id", ID, primary_key=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("supplier_id", ID, sa.ForeignKey("suppliers.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("user_id", ID, sa.ForeignKey("users.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("grand_total", sa.Float(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_purchasings_supplier_id", "purchasings", ["supplier_id"])
    op.create_index("ix_purchasings_user_id", "purchasings", ["user_id"])
    op.create_index("ix_purchasings_deleted_at", "purchasings", ["deleted_at"])

    op.create_table(
        "purchasing_details",
        sa.Column("id", ID, primary_key=True),
        sa.Column(
            "purchasing_id",
            ID,
            sa.ForeignKey("purchasings.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("item_id", ID, sa.ForeignKey("items.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("qty", sa.Integer(), nullable=False),
        sa.Column("sub_total", sa.Float(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.CheckConstraint("qty > 0", name="ck_purchasing_detail_qty_pos"),
    )
    op.create_index("ix_purchasing_details_purchasing_id", "purchasing_details", ["purchasing_id"])
    op.create_index("ix_purchasing_details_deleted_at", "purchasing_details", ["deleted_at"])


def downgrade() -> None:
    op.drop_table("purchasing_details")
    op.drop_table("purchasings")
    op.drop_table("items")
    op.drop_table("suppliers")
    op.drop_table("users")

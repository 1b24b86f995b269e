"""Initial schema — users, roles, sessions, franchises, stores, menu, orders.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
    )

    op.create_table(
        "user_roles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("object_id", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_index("ix_user_roles_user_id", "user_roles", ["user_id"])
    op.create_index("ix_user_roles_object_id", "user_roles", ["object_id"])

    op.create_table(
        "auth_tokens",
        sa.Column("token", sa.String(512), primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
    )
    op.create_index("ix_auth_tokens_user_id", "auth_tokens", ["user_id"])

    op.create_table(
        "franchises",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "stores",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("franchise_id", sa.Integer, sa.ForeignKey("franchises.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_stores_franchise_id", "stores", ["franchise_id"])

    op.create_table(
        "menu_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(64), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("image", sa.String(1024), nullable=False),
        sa.Column("price", sa.Numeric(10, 8), nullable=False),
    )
    op.create_index("ix_menu_items_title", "menu_items", ["title"])

    op.create_table(
        "diner_orders",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("diner_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("franchise_id", sa.Integer, nullable=False),
        sa.Column("store_id", sa.Integer, nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_diner_orders_diner_id", "diner_orders", ["diner_id"])
    op.create_index("ix_diner_orders_franchise_id", "diner_orders", ["franchise_id"])
    op.create_index("ix_diner_orders_store_id", "diner_orders", ["store_id"])

    op.create_table(
        "order_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("order_id", sa.Integer, sa.ForeignKey("diner_orders.id"), nullable=False),
        sa.Column("menu_id", sa.Integer, nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("price", sa.Numeric(10, 8), nullable=False),
    )
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"])
    op.create_index("ix_order_items_menu_id", "order_items", ["menu_id"])

    op.create_table(
        "order_fulfillments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("order_id", sa.Integer, sa.ForeignKey("diner_orders.id"), nullable=False, unique=True),
        sa.Column("receipt", sa.Text, nullable=False),
        sa.Column("report_url", sa.String(1024), nullable=True),
        sa.Column("recorded_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("order_fulfillments")
    op.drop_table("order_items")
    op.drop_table("diner_orders")
    op.drop_table("menu_items")
    op.drop_table("stores")
    op.drop_table("franchises")
    op.drop_table("auth_tokens")
    op.drop_table("user_roles")
    op.drop_table("users")

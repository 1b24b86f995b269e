"""Order ORM — diner orders, their item snapshots, and fulfillment receipts.

Invariants:
    - An order and all of its items are written in one transaction
    - Orders and items are never mutated after creation
    - OrderItem.description/price are snapshots: later menu changes do not touch them
    - At most one fulfillment receipt per order

Design Decisions:
    - franchise_id/store_id carry no FK: orders outlive franchise deletion and keep
      the ids they were placed against (revenue reporting joins on store_id)
    - date uses a Python-side UTC default so SQLite and PostgreSQL agree
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jwt_pizza.db.base import Base


class DinerOrder(Base):
    __tablename__ = "diner_orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    diner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    franchise_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    store_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem", back_populates="order", order_by="OrderItem.id",
        lazy="selectin",
    )


class OrderItem(Base):
    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("diner_orders.id"), nullable=False, index=True,
    )
    menu_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 8), nullable=False)

    order: Mapped["DinerOrder"] = relationship(
        "DinerOrder", back_populates="items",
    )


class OrderFulfillment(Base):
    """Acknowledgment returned by the external fulfillment service."""
    __tablename__ = "order_fulfillments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("diner_orders.id"), nullable=False, unique=True,
    )
    receipt: Mapped[str] = mapped_column(Text, nullable=False)
    report_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

"""Franchise and Store ORM — organizations and the stores they own.

Invariants:
    - Franchise.name is unique
    - A Store always has an existing owning Franchise (franchise_id FK)
    - Stores are deleted before their franchise, inside one transaction

Design Decisions:
    - Cascade is done explicitly by FranchiseStore.delete_franchise, not by ORM
      cascade: the same transaction must also remove franchisee role bindings,
      which are not reachable through a relationship
    - sqlite_autoincrement: ids are never reused after deletion, since orders keep
      the store_id they were placed against and revenue joins on it
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jwt_pizza.db.base import Base


class Franchise(Base):
    __tablename__ = "franchises"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    stores: Mapped[list["Store"]] = relationship(
        "Store", back_populates="franchise", order_by="Store.id",
        lazy="selectin",
    )


class Store(Base):
    __tablename__ = "stores"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    franchise_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("franchises.id"), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    franchise: Mapped["Franchise"] = relationship(
        "Franchise", back_populates="stores",
    )

"""User ORM — registered accounts and their role bindings.

Invariants:
    - email is unique across users
    - password holds a one-way digest, never plaintext, never serialized outward
    - Users are never hard-deleted by the core
    - object_id is 0 for diner/admin bindings, the franchise id for franchisee bindings

Design Decisions:
    - Table named "users" (not "user"): "user" is reserved in PostgreSQL
    - No FK from user_roles.object_id to franchises: the column also holds the 0 sentinel;
      franchise deletion removes its bindings in the same transaction instead
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jwt_pizza.core.domain_types import NO_OBJECT
from jwt_pizza.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    roles: Mapped[list["UserRole"]] = relationship(
        "UserRole", back_populates="user", order_by="UserRole.id",
        lazy="selectin",
    )


class UserRole(Base):
    """RoleBinding row — (user, role, scope)."""
    __tablename__ = "user_roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    object_id: Mapped[int] = mapped_column(
        Integer, nullable=False, default=NO_OBJECT, index=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="roles")

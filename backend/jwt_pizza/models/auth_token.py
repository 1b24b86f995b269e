"""AuthToken ORM — the session registry table.

Invariants:
    - token holds only the signature segment of an issued credential
    - Presence of a row is the sole authority for "this session is active"
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jwt_pizza.db.base import Base


class AuthToken(Base):
    __tablename__ = "auth_tokens"

    token: Mapped[str] = mapped_column(String(512), primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )

"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Identifiers are integer primary keys assigned by storage

Design Decisions:
    - One file per aggregate for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references and Base.metadata is complete before create_all or alembic runs
"""

from jwt_pizza.models.user import User, UserRole  # noqa: F401
from jwt_pizza.models.auth_token import AuthToken  # noqa: F401
from jwt_pizza.models.franchise import Franchise, Store  # noqa: F401
from jwt_pizza.models.menu import MenuItem  # noqa: F401
from jwt_pizza.models.order import DinerOrder, OrderItem, OrderFulfillment  # noqa: F401

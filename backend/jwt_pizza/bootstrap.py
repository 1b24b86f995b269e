"""Composition Root — builds every component once from Settings.

Invariants:
    - Exactly one DatabaseSessionManager per Backend, shared by all stores
    - Components hold only immutable configuration plus that manager
    - init_db() is idempotent: tables are created if missing and the default
      admin is seeded only when no user has its email

Design Decisions:
    - Backend is a plain dataclass the embedding process keeps for its lifetime;
      tests build one around their own DatabaseSessionManager
"""

import logging
from dataclasses import dataclass

from jwt_pizza.config import Settings, get_settings
from jwt_pizza.core.domain_types import Role
from jwt_pizza.core.errors import NotFoundError
from jwt_pizza.db.base import Base
from jwt_pizza.infrastructure.credential_store import CredentialStore
from jwt_pizza.infrastructure.database import DatabaseSessionManager
from jwt_pizza.infrastructure.token_codec import TokenCodec
from jwt_pizza.schemas.user import RoleRequest
from jwt_pizza.services.auth_service import AuthService
from jwt_pizza.services.franchise_service import FranchiseService
from jwt_pizza.services.order_service import OrderService
from jwt_pizza.services.user_service import UserService
from jwt_pizza.store.franchise_store import FranchiseStore
from jwt_pizza.store.order_store import OrderStore
from jwt_pizza.store.session_registry import SessionRegistry
from jwt_pizza.store.user_store import UserStore
import jwt_pizza.models  # noqa: F401

logger = logging.getLogger(__name__)


@dataclass
class Backend:
    db: DatabaseSessionManager
    sessions: SessionRegistry
    users: UserStore
    franchises: FranchiseStore
    orders: OrderStore
    auth: AuthService
    user_service: UserService
    franchise_service: FranchiseService
    order_service: OrderService


def build_backend(
    settings: Settings | None = None, db: DatabaseSessionManager | None = None,
) -> Backend:
    """Wire every component; settings default to the cached process Settings."""
    settings = settings or get_settings()
    if db is None:
        db = DatabaseSessionManager(
            settings.database_url,
            connect_timeout=settings.database_connect_timeout_seconds,
            echo=settings.database_echo,
        )
    hasher = CredentialStore(settings.password_hash_rounds)
    codec = TokenCodec(settings.jwt_secret, settings.jwt_algorithm)

    sessions = SessionRegistry(db)
    users = UserStore(db, hasher)
    franchises = FranchiseStore(db)
    orders = OrderStore(db, settings.list_per_page)
    auth = AuthService(sessions, users, codec)
    return Backend(
        db=db,
        sessions=sessions,
        users=users,
        franchises=franchises,
        orders=orders,
        auth=auth,
        user_service=UserService(users, auth),
        franchise_service=FranchiseService(franchises, settings.list_per_page),
        order_service=OrderService(orders),
    )


async def init_db(backend: Backend, settings: Settings | None = None) -> None:
    """Create missing tables and seed the default admin account."""
    settings = settings or get_settings()
    async with backend.db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        await backend.users.get_user(settings.default_admin_email)
    except NotFoundError:
        admin = await backend.users.create_user(
            settings.default_admin_name,
            settings.default_admin_email,
            settings.default_admin_password,
            [RoleRequest(role=Role.ADMIN)],
        )
        logger.info("Default admin seeded", extra={"user_id": admin.id})

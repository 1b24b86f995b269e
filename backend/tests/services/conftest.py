"""Store and service fixtures — a fresh SQLite database per test, fully bootstrapped.

Invariants:
    - Every test gets its own database file under tmp_path
    - The backend is built by build_backend + init_db exactly as in production,
      so the default admin (a@jwt.com / admin) always exists
    - connection_tracker counts connections currently checked out of the engine

Design Decisions:
    - File-backed SQLite over :memory:: with NullPool every operation opens its
      own connection, and they must all see the same database
    - Low bcrypt cost (4 rounds) keeps hashing fast
"""

from decimal import Decimal

import pytest
from sqlalchemy import event

from jwt_pizza.bootstrap import build_backend, init_db
from jwt_pizza.config import Settings
from jwt_pizza.core.claims import Claims
from jwt_pizza.core.domain_types import Role
from jwt_pizza.infrastructure.database import DatabaseSessionManager
from jwt_pizza.schemas.order import MenuItemCreate
from jwt_pizza.schemas.user import RoleRequest


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'pizza.db'}",
        jwt_secret="test-secret",
        password_hash_rounds=4,
        list_per_page=10,
    )


@pytest.fixture
async def db_manager(settings):
    manager = DatabaseSessionManager(settings.database_url, connect_timeout=5)
    yield manager
    await manager.dispose()


@pytest.fixture
async def backend(settings, db_manager):
    built = build_backend(settings, db_manager)
    await init_db(built, settings)
    return built


@pytest.fixture
def connection_tracker(db_manager):
    """{"out": n} where n is the number of connections currently checked out."""
    counts = {"out": 0, "total": 0}

    def on_checkout(*_):
        counts["out"] += 1
        counts["total"] += 1

    def on_checkin(*_):
        counts["out"] -= 1

    target = db_manager.engine.sync_engine
    event.listen(target, "checkout", on_checkout)
    event.listen(target, "checkin", on_checkin)
    yield counts
    event.remove(target, "checkout", on_checkout)
    event.remove(target, "checkin", on_checkin)


def claims_for(user) -> Claims:
    """Claims as they would be decoded from a credential issued for user."""
    return Claims(id=user.id, name=user.name, email=user.email, roles=tuple(user.roles))


@pytest.fixture
async def admin(backend):
    return claims_for(await backend.users.get_user("a@jwt.com"))


@pytest.fixture
async def diner(backend):
    user = await backend.users.create_user(
        "pizza diner", "d@jwt.com", "diner", [RoleRequest(role=Role.DINER)],
    )
    return claims_for(user)


@pytest.fixture
async def menu(backend):
    """Two menu items with prices exact in binary floating point."""
    veggie = await backend.orders.add_menu_item(MenuItemCreate(
        title="Veggie", description="A garden of delight",
        image="pizza1.png", price=Decimal("0.5"),
    ))
    pepperoni = await backend.orders.add_menu_item(MenuItemCreate(
        title="Pepperoni", description="Spicy treat",
        image="pizza2.png", price=Decimal("0.25"),
    ))
    return veggie, pepperoni


@pytest.fixture
def as_claims():
    return claims_for

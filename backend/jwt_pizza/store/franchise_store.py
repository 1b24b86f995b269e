"""Franchise Store — franchises, their stores, and the franchisee bindings that own them.

Invariants:
    - Franchise creation resolves every admin email before anything is written
    - Franchise deletion removes stores, franchisee bindings, then the franchise,
      all in one transaction; a failure at any step leaves every row in place
    - Listings fetch limit + 1 rows and report "more" iff the extra row came back
    - Store deletion is scoped by both franchise id and store id

Design Decisions:
    - Revenue is computed per store at read time (sum of order item prices);
      no running totals are stored
    - Listing enrichment (admins, revenue) only for admin viewers; everyone
      else sees store ids and names
"""

import logging
from decimal import Decimal
from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jwt_pizza.core.claims import Claims
from jwt_pizza.core.domain_types import FranchiseId, Role, StoreId, UserId
from jwt_pizza.core.errors import NotFoundError
from jwt_pizza.core.pagination import page_offset, to_like_pattern, trim_window
from jwt_pizza.infrastructure.database import DatabaseSessionManager
from jwt_pizza.models.franchise import Franchise, Store
from jwt_pizza.models.order import DinerOrder, OrderItem
from jwt_pizza.models.user import User, UserRole
from jwt_pizza.schemas.franchise import FranchiseAdminOut, FranchiseOut, StoreOut

logger = logging.getLogger(__name__)

FRANCHISEE = Role.FRANCHISEE.value


def _franchise_cascade(franchise_id: int) -> list:
    """Statements that remove a franchise and everything hanging off it, in order."""
    return [
        delete(Store).where(Store.franchise_id == franchise_id),
        delete(UserRole).where(
            UserRole.role == FRANCHISEE, UserRole.object_id == franchise_id,
        ),
        delete(Franchise).where(Franchise.id == franchise_id),
    ]


def _plain(franchise: Franchise) -> FranchiseOut:
    return FranchiseOut(
        id=franchise.id,
        name=franchise.name,
        stores=[StoreOut(id=s.id, name=s.name) for s in franchise.stores],
    )


async def _enriched(db: AsyncSession, franchise: Franchise) -> FranchiseOut:
    admins = await db.execute(
        select(User.id, User.name, User.email)
        .join(UserRole, UserRole.user_id == User.id)
        .where(UserRole.role == FRANCHISEE, UserRole.object_id == franchise.id)
        .order_by(User.id),
    )
    stores = await db.execute(
        select(Store.id, Store.name, func.coalesce(func.sum(OrderItem.price), 0))
        .outerjoin(DinerOrder, DinerOrder.store_id == Store.id)
        .outerjoin(OrderItem, OrderItem.order_id == DinerOrder.id)
        .where(Store.franchise_id == franchise.id)
        .group_by(Store.id, Store.name)
        .order_by(Store.id),
    )
    return FranchiseOut(
        id=franchise.id,
        name=franchise.name,
        admins=[FranchiseAdminOut(id=i, name=n, email=e) for i, n, e in admins.all()],
        stores=[
            StoreOut(id=i, name=n, total_revenue=Decimal(str(total)))
            for i, n, total in stores.all()
        ],
    )


class FranchiseStore:
    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def create_franchise(self, name: str, admin_emails: Sequence[str]) -> FranchiseOut:
        async with self._db.transaction("unable to create franchise") as db:
            admins: list[FranchiseAdminOut] = []
            for email in admin_emails:
                found = (await db.execute(
                    select(User.id, User.name, User.email).where(User.email == email),
                )).one_or_none()
                if found is None:
                    raise NotFoundError(
                        f"unknown user for franchise admin {email} provided",
                        resource_type="user",
                    )
                admins.append(FranchiseAdminOut(id=found.id, name=found.name, email=found.email))

            franchise = Franchise(name=name)
            db.add(franchise)
            await db.flush()
            for admin in admins:
                db.add(UserRole(user_id=admin.id, role=FRANCHISEE, object_id=franchise.id))
            franchise_id = franchise.id

        logger.info(f"Franchise created: {name}", extra={"franchise_id": franchise_id})
        return FranchiseOut(id=franchise_id, name=name, admins=admins, stores=[])

    async def delete_franchise(self, franchise_id: FranchiseId) -> None:
        async with self._db.transaction("unable to delete franchise") as db:
            for stmt in _franchise_cascade(franchise_id):
                await db.execute(stmt)
        logger.info("Franchise deleted", extra={"franchise_id": franchise_id})

    async def get_franchises(
        self,
        viewer: Claims | None = None,
        page: int = 0,
        limit: int = 10,
        name_filter: str | None = "*",
    ) -> tuple[list[FranchiseOut], bool]:
        """One page of franchises whose name matches the wildcard filter.

        Pages count from 0. Returns (franchises, more).
        """
        offset = page_offset(page, limit, first_page=0)
        async with self._db.session() as db:
            rows = (await db.scalars(
                select(Franchise)
                .where(Franchise.name.like(to_like_pattern(name_filter)))
                .order_by(Franchise.id)
                .offset(offset)
                .limit(limit + 1),
            )).all()
            franchises, more = trim_window(rows, limit)
            if viewer is not None and viewer.has_role(Role.ADMIN):
                return [await _enriched(db, f) for f in franchises], more
        return [_plain(f) for f in franchises], more

    async def get_user_franchises(self, user_id: UserId) -> list[FranchiseOut]:
        async with self._db.session() as db:
            owned = select(UserRole.object_id).where(
                UserRole.user_id == user_id, UserRole.role == FRANCHISEE,
            )
            franchises = (await db.scalars(
                select(Franchise).where(Franchise.id.in_(owned)).order_by(Franchise.id),
            )).all()
            return [await _enriched(db, f) for f in franchises]

    async def get_franchise(self, franchise_id: FranchiseId) -> FranchiseOut:
        async with self._db.session() as db:
            franchise = await db.scalar(select(Franchise).where(Franchise.id == franchise_id))
            if franchise is None:
                raise NotFoundError("unknown franchise", resource_type="franchise")
            return await _enriched(db, franchise)

    async def create_store(self, franchise_id: FranchiseId, name: str) -> StoreOut:
        async with self._db.session() as db:
            store = Store(franchise_id=franchise_id, name=name)
            db.add(store)
            await db.commit()
            store_id = store.id
        logger.info(
            f"Store created: {name}",
            extra={"franchise_id": franchise_id, "store_id": store_id},
        )
        return StoreOut(id=store_id, name=name, franchise_id=franchise_id)

    async def delete_store(self, franchise_id: FranchiseId, store_id: StoreId) -> None:
        async with self._db.session() as db:
            await db.execute(
                delete(Store).where(Store.franchise_id == franchise_id, Store.id == store_id),
            )
            await db.commit()
        logger.info(
            "Store deleted", extra={"franchise_id": franchise_id, "store_id": store_id},
        )

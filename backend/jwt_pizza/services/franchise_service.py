"""Franchise Service — franchise listings and policy-gated franchise/store mutations.

Invariants:
    - Denied listing of another user's franchises yields [], not an error
    - Store mutations look the franchise up first: unknown ids are NotFound,
      known ids the caller cannot manage are Forbidden
"""

import logging

from jwt_pizza.core.authorization import (
    can_manage_franchises, can_manage_store, can_view_franchise_set,
)
from jwt_pizza.core.claims import Claims
from jwt_pizza.core.errors import ErrorContext, ForbiddenError
from jwt_pizza.schemas.franchise import (
    FranchiseCreate, FranchiseOut, FranchisePage, StoreCreate, StoreOut,
)
from jwt_pizza.store.franchise_store import FranchiseStore

logger = logging.getLogger(__name__)


def _denied(claims: Claims, message: str, franchise_id: int | None = None) -> ForbiddenError:
    logger.warning(
        f"Denied: {message}", extra={"user_id": claims.id, "franchise_id": franchise_id},
    )
    return ForbiddenError(message, ErrorContext(user_id=claims.id, franchise_id=franchise_id))


class FranchiseService:
    def __init__(self, franchises: FranchiseStore, list_per_page: int = 10):
        self._franchises = franchises
        self._page_size = list_per_page

    async def list_franchises(
        self,
        claims: Claims | None,
        page: int = 0,
        limit: int | None = None,
        name: str | None = "*",
    ) -> FranchisePage:
        franchises, more = await self._franchises.get_franchises(
            claims, page, self._page_size if limit is None else limit, name,
        )
        return FranchisePage(franchises=franchises, more=more)

    async def list_user_franchises(self, claims: Claims, user_id: int) -> list[FranchiseOut]:
        if not can_view_franchise_set(claims, user_id):
            return []
        return await self._franchises.get_user_franchises(user_id)

    async def create_franchise(self, claims: Claims, franchise: FranchiseCreate) -> FranchiseOut:
        if not can_manage_franchises(claims):
            raise _denied(claims, "unable to create a franchise")
        return await self._franchises.create_franchise(
            franchise.name, [a.email for a in franchise.admins],
        )

    async def delete_franchise(self, claims: Claims, franchise_id: int) -> None:
        if not can_manage_franchises(claims):
            raise _denied(claims, "unable to delete a franchise", franchise_id)
        await self._franchises.delete_franchise(franchise_id)

    async def create_store(self, claims: Claims, franchise_id: int, store: StoreCreate) -> StoreOut:
        franchise = await self._franchises.get_franchise(franchise_id)
        if not can_manage_store(claims, franchise):
            raise _denied(claims, "unable to create a store", franchise_id)
        return await self._franchises.create_store(franchise.id, store.name)

    async def delete_store(self, claims: Claims, franchise_id: int, store_id: int) -> None:
        franchise = await self._franchises.get_franchise(franchise_id)
        if not can_manage_store(claims, franchise):
            raise _denied(claims, "unable to delete a store", franchise_id)
        await self._franchises.delete_store(franchise.id, store_id)

"""User Service — the caller's own identity and profile updates."""

import logging

from jwt_pizza.core.authorization import can_modify_user
from jwt_pizza.core.claims import Claims
from jwt_pizza.core.errors import ErrorContext, ForbiddenError
from jwt_pizza.schemas.user import AuthResult, UserUpdate
from jwt_pizza.services.auth_service import AuthService
from jwt_pizza.store.user_store import UserStore

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserStore, auth: AuthService):
        self._users = users
        self._auth = auth

    def me(self, claims: Claims) -> Claims:
        return claims

    async def update_user(self, claims: Claims, user_id: int, changes: UserUpdate) -> AuthResult:
        """Apply a partial update; the caller receives a fresh credential for the user."""
        if not can_modify_user(claims, user_id):
            logger.warning(
                "User update denied", extra={"user_id": claims.id, "operation": "update_user"},
            )
            raise ForbiddenError("unauthorized", ErrorContext(user_id=claims.id))
        user = await self._users.update_user(
            user_id, name=changes.name, email=changes.email, password=changes.password,
        )
        return await self._auth.issue_session(user)

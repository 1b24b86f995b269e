"""Auth Service — registration, login, logout, and credential authentication.

Invariants:
    - A credential authenticates only if its signature is registered AND it decodes
    - Claims come from the credential itself; storage is not re-read per request
    - Every credential handed out has been registered before it is returned
"""

import logging

from jwt_pizza.core.claims import Claims
from jwt_pizza.core.domain_types import Role
from jwt_pizza.core.errors import UnauthorizedError
from jwt_pizza.core.repository_protocols import CredentialCodec
from jwt_pizza.core.session_tokens import read_bearer
from jwt_pizza.schemas.user import AuthResult, RoleRequest, UserCreate, UserOut
from jwt_pizza.store.session_registry import SessionRegistry
from jwt_pizza.store.user_store import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, registry: SessionRegistry, users: UserStore, codec: CredentialCodec):
        self._registry = registry
        self._users = users
        self._codec = codec

    @staticmethod
    def read_bearer(authorization: str | None) -> str | None:
        return read_bearer(authorization)

    async def authenticate(self, credential: str | None) -> Claims:
        if not credential or not await self._registry.is_active(credential):
            raise UnauthorizedError()
        return self._codec.decode(credential)

    async def issue_session(self, user: UserOut) -> AuthResult:
        """Sign a credential for user, register it, and pair the two."""
        claims = Claims(id=user.id, name=user.name, email=user.email, roles=tuple(user.roles))
        token = self._codec.issue(claims)
        await self._registry.register(user.id, token)
        return AuthResult(user=user, token=token)

    async def register(self, new_user: UserCreate) -> AuthResult:
        user = await self._users.create_user(
            new_user.name, new_user.email, new_user.password,
            [RoleRequest(role=Role.DINER)],
        )
        return await self.issue_session(user)

    async def login(self, email: str, password: str) -> AuthResult:
        user = await self._users.get_user(email, password)
        logger.info("User logged in", extra={"user_id": user.id})
        return await self.issue_session(user)

    async def logout(self, credential: str | None) -> None:
        claims = await self.authenticate(credential)
        await self._registry.revoke(credential)
        logger.info("User logged out", extra={"user_id": claims.id})

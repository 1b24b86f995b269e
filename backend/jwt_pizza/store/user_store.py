"""User Store — accounts and their role bindings.

Invariants:
    - Passwords are hashed before they reach storage; digests never leave this module
    - Every franchisee binding names an existing franchise, by id or by name
    - A user and all of its role bindings are written in one transaction
    - get_user() raises the same NotFoundError for an unknown email and a wrong password
    - Roles come back as validated RoleBindings; the zero object_id is omitted

Design Decisions:
    - Hashing and verification happen outside any open session so a connection
      is never held while bcrypt runs
"""

import logging
from typing import Sequence

from sqlalchemy import select, update

from jwt_pizza.core.claims import RoleBinding, binding_from_row
from jwt_pizza.core.domain_types import NO_OBJECT, Role, UserId
from jwt_pizza.core.errors import NotFoundError
from jwt_pizza.core.repository_protocols import PasswordHasher
from jwt_pizza.infrastructure.database import DatabaseSessionManager
from jwt_pizza.models.franchise import Franchise
from jwt_pizza.models.user import User, UserRole
from jwt_pizza.schemas.user import RoleRequest, UserOut
from jwt_pizza.store.lookup import get_id

logger = logging.getLogger(__name__)

UNKNOWN_USER = "unknown user"


def _user_out(row: User) -> UserOut:
    return UserOut(
        id=row.id,
        name=row.name,
        email=row.email,
        roles=[binding_from_row(r.role, r.object_id) for r in row.roles],
    )


class UserStore:
    def __init__(self, db: DatabaseSessionManager, hasher: PasswordHasher):
        self._db = db
        self._hasher = hasher

    async def create_user(
        self, name: str, email: str, password: str, roles: Sequence[RoleRequest],
    ) -> UserOut:
        digest = await self._hasher.hash(password)
        bindings: list[RoleBinding] = []
        async with self._db.transaction("unable to create user") as db:
            row = User(name=name, email=email, password=digest)
            db.add(row)
            await db.flush()
            for role in roles:
                object_id = NO_OBJECT
                if role.role == Role.FRANCHISEE:
                    column = "id" if role.object_id else "name"
                    object_id = await get_id(
                        db, column, role.object_id or role.object, Franchise,
                    )
                db.add(UserRole(user_id=row.id, role=role.role.value, object_id=object_id))
                bindings.append(binding_from_row(role.role.value, object_id))
            await db.flush()
            user_id = row.id
        logger.info("User created", extra={"user_id": user_id})
        return UserOut(id=user_id, name=name, email=email, roles=bindings)

    async def get_user(self, email: str, password: str | None = None) -> UserOut:
        async with self._db.session() as db:
            row = await db.scalar(select(User).where(User.email == email))
        if row is None:
            raise NotFoundError(UNKNOWN_USER, resource_type="user")
        if password is not None and not await self._hasher.verify(password, row.password):
            raise NotFoundError(UNKNOWN_USER, resource_type="user")
        return _user_out(row)

    async def get_user_by_id(self, user_id: UserId) -> UserOut:
        async with self._db.session() as db:
            row = await db.scalar(select(User).where(User.id == user_id))
        if row is None:
            raise NotFoundError(UNKNOWN_USER, resource_type="user")
        return _user_out(row)

    async def update_user(
        self,
        user_id: UserId,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> UserOut:
        """Write only the supplied fields, then return the stored user."""
        values: dict = {}
        if name is not None:
            values["name"] = name
        if email is not None:
            values["email"] = email
        if password is not None:
            values["password"] = await self._hasher.hash(password)
        if values:
            async with self._db.session() as db:
                await db.execute(update(User).where(User.id == user_id).values(**values))
                await db.commit()
            logger.info(
                f"User updated: {sorted(values)}", extra={"user_id": user_id},
            )
        return await self.get_user_by_id(user_id)

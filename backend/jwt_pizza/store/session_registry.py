"""Session Registry — the set of active credentials, keyed by signature segment.

Invariants:
    - Only the signature segment is stored, never the full credential
    - A signature is active iff its row exists
    - register() is idempotent: a second registration of the same signature is a no-op
    - revoke() of an unknown signature succeeds silently

Design Decisions:
    - INSERT ... ON CONFLICT DO NOTHING on PostgreSQL and SQLite, so concurrent
      registrations of the same signature cannot race into an integrity error
"""

import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.dialects import postgresql, sqlite

from jwt_pizza.core.errors import UnauthorizedError
from jwt_pizza.core.session_tokens import token_signature
from jwt_pizza.infrastructure.database import DatabaseSessionManager
from jwt_pizza.models.auth_token import AuthToken

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SessionRegistry:
    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    def _insert_ignoring_duplicate(self, signature: str, user_id: int):
        dialect_insert = _UPSERT_DIALECTS.get(self._db.engine.dialect.name)
        if dialect_insert is None:
            return None
        stmt = dialect_insert(AuthToken).values(token=signature, user_id=user_id)
        return stmt.on_conflict_do_nothing(index_elements=["token"])

    async def register(self, user_id: int, credential: str) -> None:
        signature = token_signature(credential)
        if not signature:
            raise UnauthorizedError()
        stmt = self._insert_ignoring_duplicate(signature, user_id)
        async with self._db.session() as db:
            if stmt is None:
                exists = await db.scalar(
                    select(AuthToken.token).where(AuthToken.token == signature),
                )
                if exists is not None:
                    return
                stmt = insert(AuthToken).values(token=signature, user_id=user_id)
            await db.execute(stmt)
            await db.commit()
        logger.info("Session registered", extra={"user_id": user_id})

    async def is_active(self, credential: str | None) -> bool:
        signature = token_signature(credential)
        if not signature:
            return False
        async with self._db.session() as db:
            found = await db.scalar(
                select(AuthToken.token).where(AuthToken.token == signature),
            )
        return found is not None

    async def revoke(self, credential: str | None) -> None:
        signature = token_signature(credential)
        if not signature:
            return
        async with self._db.session() as db:
            await db.execute(delete(AuthToken).where(AuthToken.token == signature))
            await db.commit()

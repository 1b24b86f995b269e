"""Database Session Manager — per-operation connections, automatic rollback, transactions.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Every session is closed on every exit path; with NullPool that closes the
      underlying connection, so nothing stays checked out between operations
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - transaction() lets PizzaError through unchanged and turns anything else
      into InternalError(failure_message), cause logged but never embedded

Design Decisions:
    - One instance per Backend, built by bootstrap.build_backend and passed into
      every store: no module-level singleton
    - NullPool: each logical operation acquires its own connection and releases it
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.pool import NullPool
from sqlalchemy import text

from jwt_pizza.core.errors import DatabaseError, InternalError, PizzaError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Hands out async sessions and transaction scopes over one engine."""

    def __init__(
        self, database_url: str, connect_timeout: int = 60, echo: bool = False,
    ):
        self.engine = create_async_engine(
            database_url,
            poolclass=NullPool,
            echo=echo,
            connect_args={"timeout": connect_timeout},
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown") from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    @asynccontextmanager
    async def transaction(
        self, failure_message: str,
    ) -> AsyncGenerator[AsyncSession, None]:
        """Session inside BEGIN ... COMMIT; rolled back as a whole on any failure."""
        async with self.session() as db:
            try:
                async with db.begin():
                    yield db
            except PizzaError:
                raise
            except Exception as e:
                logger.error(
                    f"Transaction rolled back: {failure_message}",
                    exc_info=True,
                    extra={"operation": failure_message, "error_code": "INTERNAL_ERROR"},
                )
                raise InternalError(failure_message) from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except PizzaError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()

"""Single-column id lookup — the one generic query shape the stores share."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jwt_pizza.core.errors import NotFoundError


async def get_id(db: AsyncSession, column: str, value: Any, table: type) -> int:
    """Id of the first row of table whose column equals value.

    Runs on the caller's session so it joins any open transaction.
    Raises NotFoundError("No ID found") when no row matches.
    """
    result = await db.execute(
        select(table.id).where(getattr(table, column) == value).order_by(table.id).limit(1),
    )
    found = result.scalar_one_or_none()
    if found is None:
        raise NotFoundError("No ID found", resource_type=table.__tablename__)
    return found

"""
Application Sections Repository

Database operations shared by all four section tables. Every table has a
unique user_id column, which is what the upsert conflicts on.

Design Principles:
- The upsert is a single INSERT ... ON CONFLICT (user_id) DO UPDATE, so a
  concurrent reader never sees a half-written record
- The record id and created_at are assigned once and survive later upserts
- Single responsibility - only database operations, no business logic
"""

from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.modules.shared import BaseModel, utcnow

ModelT = TypeVar("ModelT", bound=BaseModel)

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


def _insert_for(db: AsyncSession):
    """Pick the dialect-specific insert construct that supports ON CONFLICT."""
    dialect = db.get_bind().dialect.name
    try:
        return _UPSERT_INSERTS[dialect]
    except KeyError as e:
        raise RuntimeError(f"Upsert is not supported on the '{dialect}' dialect") from e


async def upsert_for_user(
    db: AsyncSession,
    model: type[ModelT],
    user_id: UUID,
    values: dict[str, Any],
) -> ModelT:
    """
    Create the user's record, or replace its fields if one exists.

    Args:
        db: Database session
        model: Section model class
        user_id: Owner of the record
        values: Column values to write (every mutable field)

    Returns:
        The persisted record, including id and timestamps
    """
    insert = _insert_for(db)

    stmt = insert(model).values(user_id=user_id, **values)
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id"],
        set_={**values, "updated_at": utcnow()},
    )

    result = await db.scalars(
        stmt.returning(model),
        execution_options={"populate_existing": True},
    )
    record = result.one()
    await db.commit()

    return record


async def get_by_user(db: AsyncSession, model: type[ModelT], user_id: UUID) -> ModelT | None:
    """Get the user's record, or None if it has not been submitted yet."""
    result = await db.execute(select(model).where(model.user_id == user_id))
    return result.scalar_one_or_none()


async def value_taken_by_other_user(
    db: AsyncSession,
    model: type[BaseModel],
    column: str,
    value: Any,
    user_id: UUID,
) -> bool:
    """Check whether another user's record already holds this value in a unique column."""
    result = await db.execute(
        select(model.id).where(
            getattr(model, column) == value,
            model.user_id != user_id,
        )
    )
    return result.first() is not None

"""
Application Sections Service Layer

Business logic for the per-user application sections:

1. Upsert: find-or-create the caller's record for a section and replace all
   of its fields with the validated input. Replaying the same input leaves
   one record with the same id.
2. Fetch: the caller's record for a section, or NotFoundError.
3. Fetch all: the four sections looked up concurrently, each on its own
   session; missing sections come back as None.

Every operation requires a caller identity.
"""

import asyncio
import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.auth import CurrentUser
from admissions.core.database import Database
from admissions.core.exceptions import NotFoundError, ServiceError, UnauthenticatedError
from admissions.core.validation import RequestSchema
from admissions.modules.applications import repository
from admissions.modules.applications.schemas import ApplicationOverview
from admissions.modules.applications.sections import SECTIONS, SectionDefinition
from admissions.modules.shared.schemas import ResponseSchema

logger = logging.getLogger(__name__)


def _require_caller(caller: CurrentUser | None) -> CurrentUser:
    if caller is None:
        raise UnauthenticatedError()
    return caller


async def _find_unique_conflict(
    db: AsyncSession,
    section: SectionDefinition,
    caller: CurrentUser,
    values: dict[str, Any],
) -> type[ServiceError] | None:
    """Return the conflict error of the first unique field another user already holds."""
    for column, conflict_error in section.unique_fields.items():
        if await repository.value_taken_by_other_user(
            db, section.model, column, values[column], caller.id
        ):
            return conflict_error
    return None


async def upsert_section(
    db: AsyncSession,
    section: SectionDefinition,
    caller: CurrentUser | None,
    data: RequestSchema,
) -> ResponseSchema:
    """
    Create or replace the caller's record for a section.

    Args:
        db: Database session
        section: Which section to write
        caller: Authenticated caller
        data: Validated input for this section

    Returns:
        The persisted record

    Raises:
        UnauthenticatedError: If there is no caller
        ServiceError: The section's conflict error if a unique value
            (e.g. the CNIC) belongs to another user
    """
    caller = _require_caller(caller)
    values = data.model_dump()

    conflict_error = await _find_unique_conflict(db, section, caller, values)
    if conflict_error is not None:
        logger.warning(f"{section.name} upsert rejected for {caller.id}: unique value in use")
        raise conflict_error()

    try:
        record = await repository.upsert_for_user(db, section.model, caller.id, values)
    except IntegrityError as e:
        await db.rollback()
        # Only a value now held by another user is a conflict; anything else
        # (e.g. the owner row is gone) propagates
        conflict_error = await _find_unique_conflict(db, section, caller, values)
        if conflict_error is None:
            raise
        logger.warning(f"{section.name} upsert for {caller.id} lost a unique-value race")
        raise conflict_error() from e

    logger.info(f"Saved {section.name} {record.id} for user {caller.id}")

    return section.response_schema.model_validate(record)


async def get_section(
    db: AsyncSession,
    section: SectionDefinition,
    caller: CurrentUser | None,
) -> ResponseSchema:
    """
    Get the caller's record for a section.

    Raises:
        UnauthenticatedError: If there is no caller
        NotFoundError: If the caller has not submitted this section
    """
    caller = _require_caller(caller)

    record = await repository.get_by_user(db, section.model, caller.id)
    if record is None:
        raise NotFoundError(section.not_found_message)

    return section.response_schema.model_validate(record)


async def get_all_sections(database: Database, caller: CurrentUser | None) -> ApplicationOverview:
    """
    Get every section for the caller. Missing sections are None.

    The lookups are independent and run concurrently, each with its own
    session. Only a store error fails the whole call.

    Raises:
        UnauthenticatedError: If there is no caller
    """
    caller = _require_caller(caller)

    async def lookup(section: SectionDefinition) -> ResponseSchema | None:
        async with database.session() as db:
            record = await repository.get_by_user(db, section.model, caller.id)
            if record is None:
                return None
            return section.response_schema.model_validate(record)

    results = await asyncio.gather(*(lookup(section) for section in SECTIONS))
    found = dict(zip((section.name for section in SECTIONS), results, strict=True))

    logger.info(
        f"Fetched application for user {caller.id}: "
        + ", ".join(f"{name}={'yes' if value else 'no'}" for name, value in found.items())
    )
    return ApplicationOverview(**found)

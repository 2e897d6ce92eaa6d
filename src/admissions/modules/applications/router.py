"""
Application Router

Endpoints (all require a bearer token):
- POST /application/create-or-update-{section} - Upsert the caller's section
- GET /application/get-{section} - The caller's section, 404 if not submitted
- GET /application/all - Every section, missing ones as null

Sections: profile, family, education, extracurricular. The per-section
routes are generated from the SectionDefinition registry.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.auth import CurrentUser, get_current_user
from admissions.core.database import Database, get_database, get_db
from admissions.core.exceptions import ServiceError
from admissions.core.responses import (
    internal_error_response,
    service_error_response,
    success_response,
)
from admissions.core.validation import RequestSchema, validated_body
from admissions.modules.applications import service
from admissions.modules.applications.sections import SECTIONS, SectionDefinition

logger = logging.getLogger(__name__)

router = APIRouter()


def _add_section_routes(section: SectionDefinition) -> None:
    """Register the upsert and fetch endpoints for one section."""

    @router.post(
        f"/create-or-update-{section.name}",
        name=f"create_or_update_{section.name}",
        summary=f"Create or Update {section.name.title()}",
        responses={
            400: {"description": "Validation error (every field message in `errors`)"},
            401: {"description": "Missing, invalid or expired token"},
        },
    )
    async def create_or_update(
        current_user: CurrentUser = Depends(get_current_user),
        data: RequestSchema = Depends(validated_body(section.request_schema)),
        db: AsyncSession = Depends(get_db),
    ) -> JSONResponse:
        """Create the caller's record for this section or replace its fields."""
        try:
            record = await service.upsert_section(db, section, current_user, data)
            return success_response({section.name: record}, message=section.saved_message)
        except ServiceError as e:
            logger.warning(f"{section.name} upsert rejected: {e.message}")
            return service_error_response(e)
        except Exception as e:
            logger.exception(f"Unexpected error saving {section.name}: {e}")
            return internal_error_response()

    @router.get(
        f"/get-{section.name}",
        name=f"get_{section.name}",
        summary=f"Get {section.name.title()}",
        responses={
            401: {"description": "Missing, invalid or expired token"},
            404: {"description": section.not_found_message},
        },
    )
    async def get_one(
        current_user: CurrentUser = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ) -> JSONResponse:
        """Return the caller's record for this section."""
        try:
            record = await service.get_section(db, section, current_user)
            return success_response({section.name: record})
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.exception(f"Unexpected error fetching {section.name}: {e}")
            return internal_error_response()


for _section in SECTIONS:
    _add_section_routes(_section)


@router.get(
    "/all",
    summary="Get All Application Data",
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def get_all_application_data(
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
) -> JSONResponse:
    """
    Return every section for the caller.

    Sections that have not been submitted are null; that is not an error.
    """
    try:
        overview = await service.get_all_sections(database, current_user)
        return success_response(overview)
    except ServiceError as e:
        return service_error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error fetching application data: {e}")
        return internal_error_response()

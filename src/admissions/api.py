from fastapi import APIRouter

from admissions.modules.applications import router as applications_router
from admissions.modules.auth import router as auth_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])

api_router.include_router(applications_router, prefix="/application", tags=["Application"])

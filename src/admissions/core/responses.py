"""
Response Envelope

Every response body has the shape
{"success": bool, "message"?: str, "data"?: {...}, "errors"?: [str, ...]}.
"""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from admissions.core.exceptions import ServiceError

INTERNAL_ERROR_MESSAGE = "Internal server error"


def success_response(
    data: Any = None,
    message: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Return a success envelope."""
    content: dict[str, Any] = {"success": True}
    if message is not None:
        content["message"] = message
    if data is not None:
        content["data"] = jsonable_encoder(data, by_alias=True)
    return JSONResponse(status_code=status_code, content=content)


def error_response(
    message: str,
    status_code: int,
    errors: list[str] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Return a failure envelope."""
    content: dict[str, Any] = {"success": False, "message": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def service_error_response(error: ServiceError) -> JSONResponse:
    """Render a ServiceError as a failure envelope."""
    headers = {"WWW-Authenticate": "Bearer"} if error.status_code == 401 else None
    return error_response(error.message, error.status_code, error.errors, headers=headers)


def internal_error_response() -> JSONResponse:
    """Generic 500 envelope. Never includes internal details."""
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

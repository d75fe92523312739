# storefront_api/core/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Every error leaves the API as a flat `{"error": "..."}` body."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=headers,
    )


def _validation_message(exc: RequestValidationError) -> str:
    """
    Collapse pydantic errors into one readable line, e.g.
    "email: value is not a valid email address; password: ...".
    """
    parts = []
    for err in exc.errors():
        # Drop the "body" / "path" prefix FastAPI puts in front
        loc = [str(p) for p in err.get("loc", ())[1:]]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {err.get('msg')}")
    return "; ".join(parts) or "Invalid request"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(
        exc.status_code,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _validation_message(exc)
    logger.info(f"↩️ {request.method} {request.url.path} rejected: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def postgrest_exception_handler(request: Request, exc: APIError) -> JSONResponse:
    """
    Database failures that no service translated: 500 with the upstream
    message passed through.
    """
    logger.error(
        f"🚨 Database error in {request.method} {request.url.path}: "
        f"{exc.code} {exc.message}"
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        exc.message or "Database error",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"💥 Error in {request.method} {request.url.path}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that map every failure to `{error}` + status."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(APIError, postgrest_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

"""
Error taxonomy and the JSON failure envelope.

Services raise the ``HTTPException`` subclasses below; the handlers
registered by ``register_exception_handlers`` turn every failure into
``{"success": false, "error": "<message>"}``.
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging import get_logger

logger = get_logger("errors")


class InvalidTokenError(Exception):
    """Token signature, format, type or expiry check failed."""


class Unauthenticated(HTTPException):
    """Missing, invalid or expired credentials."""

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ValidationError(HTTPException):
    """Required field missing or empty."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFound(HTTPException):
    """Resource absent or owned by someone else."""

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class PersistenceError(HTTPException):
    """Underlying store failure."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def error_body(message: str) -> dict:
    return {"success": False, "error": message}


def _format_validation_errors(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # drop the "body"/"query"/"path" prefix from the location
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    msg = first.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on the app."""

    # starlette's base class also covers routing 404/405
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(_format_validation_errors(exc)),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error",
            exc_info=exc,
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error"),
        )

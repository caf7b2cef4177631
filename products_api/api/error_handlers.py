"""Error Handlers: global exception handlers for the products API.

Invariants:
    - ProductApiError → its own to_response() body and http_status
    - RequestValidationError → the same {"errors": [...]} shape as the rule chains
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ProductApiError), validation (Pydantic), catch-all (Exception)
    - Client errors log at WARNING/INFO, infrastructure errors at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from products_api.core.errors import (
    INTERNAL_ERROR_MESSAGE, ErrorSeverity, ProductApiError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProductApiError)
    async def api_error_handler(request: Request, exc: ProductApiError):
        """Handle all products API domain/infrastructure errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Map Pydantic errors onto the rule-chain entry shape."""
    errors = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        location = {"path": "params", "body": "body"}.get(loc[0], loc[0]) if loc else "body"
        errors.append({
            "type": "field",
            "msg": e["msg"],
            "path": ".".join(loc[1:]),
            "location": location,
        })
    return {"errors": errors}

"""
Exception handlers.

Every error response has the body {"message": str}.
"""

import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


def _format_location(loc: Sequence[Any]) -> str:
    # Drop the request part ("body", "query", ...) and join the rest
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return ".".join(parts)


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Summarise validation errors into one readable message.

    Example:
        Validation error: Field required at "title"; Input should be a valid integer at "employerId"
    """
    if not errors:
        return "Validation error"
    issues = []
    for error in errors:
        location = _format_location(error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        issues.append(f'{message} at "{location}"' if location else message)
    return "Validation error: " + "; ".join(issues)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exc_handler(request: Request, exc: HTTPException):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail) if exc.detail else "HTTP error"},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc.errors())
        logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": message},
        )

    @app.exception_handler(Exception)
    async def unhandled_exc_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error at {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )

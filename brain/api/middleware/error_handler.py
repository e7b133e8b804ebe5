"""
Exception Handlers

Turns every failure into the same JSON envelope:

    {"success": false, "error": {"code": "...", "message": "...", "details": {...}}}

Mapping:
========
    BrainException             → exc.status_code, exc.to_dict()
    RequestValidationError     → 400 VALIDATION_ERROR (FastAPI would say 422)
    pydantic ValidationError   → 400 VALIDATION_ERROR
    anything else              → 500 INTERNAL_ERROR, generic message, full
                                 traceback only in the logs

Validation details list loc / msg / type per error. The offending input
is dropped so passwords never come back in a response.
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from brain.shared.core.exceptions import BrainException
from brain.shared.core.logging import logger


def _public_errors(errors: Sequence[Any]) -> list[dict[str, Any]]:
    return [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


def _validation_response(request: Request, errors: Sequence[Any]) -> JSONResponse:
    public = _public_errors(errors)
    logger.warning("Validation error", errors=public, path=request.url.path)
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({
            "success": False,
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Validation failed",
                "details": {"errors": public},
            },
        }),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the handlers above on app."""

    @app.exception_handler(BrainException)
    async def brain_exception_handler(
        request: Request,
        exc: BrainException,
    ) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Request failed",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        return _validation_response(request, exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Models built inside a handler failed validation."""
        return _validation_response(request, exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            error_type=type(exc).__name__,
            path=request.url.path,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                },
            },
        )

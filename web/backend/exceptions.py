#!/usr/bin/env python3
"""
Error handlers for the web application.

Domain errors from core.exceptions are rendered as
{"success": false, "error": <message>, "type": <kind>}.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.exceptions import TechScoutError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    "Validation": 400,
    "NotAuthorized": 403,
    "NotFound": 404,
    "DuplicateInvitation": 409,
    "PreconditionFailed": 409,
    "TransientStoreError": 503,
}


def _error_body(message, kind: str) -> dict:
    return {
        "success": False,
        "error": message,
        "type": kind
    }


async def domain_exception_handler(
    request: Request,
    exc: TechScoutError
) -> JSONResponse:
    """
    Map a domain error to its HTTP status.

    Unknown kinds fall back to 500. Client errors are logged at INFO,
    store outages at ERROR with the traceback.
    """
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.kind} in {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.message, exc.kind)
    )


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies and parameters are Validation errors (400)."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg', 'invalid request')}" if location else "Invalid request"

    return JSONResponse(
        status_code=400,
        content=_error_body(message, "Validation")
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Plain HTTPExceptions keep their status but use the same error body."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, "HTTPException")
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Anything unexpected is logged with its traceback and reported as 500."""
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )

"""
Consolidated middleware and exception handlers for the NutriApp API
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import AppError

logger = logging.getLogger("nutriapp.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    elif isinstance(obj, Exception):
        return str(obj)
    return obj


def error_body(message: str, code: str, details=None) -> dict:
    """Error envelope shared by every handler; ``error`` is always a plain string"""
    body = {
        "success": False,
        "error": message,
        "code": code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if details:
        body["details"] = make_serializable(details)
    return body


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


def _without_input(errors) -> list:
    """Validation errors without the submitted values"""
    return [{k: v for k, v in err.items() if k != "input"} for err in errors]


def _missing_fields(errors) -> list:
    fields = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        if loc:
            fields.append(".".join(loc))
    return fields


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors as 400 Bad Request"""
    errors = _without_input(exc.errors())
    logger.warning(f"Validation error on {request.url}: {errors}")

    fields = _missing_fields(errors)
    message = "Missing or invalid fields"
    if fields:
        message = f"{message}: {', '.join(dict.fromkeys(fields))}"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, "VALIDATION_ERROR", errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), f"HTTP_{exc.status_code}"),
        headers=getattr(exc, "headers", None),
    )


async def app_error_handler(request: Request, exc: AppError):
    """Handle domain errors (validation, auth, ownership, not found, conflict)"""
    logger.warning(f"{exc.code} on {request.url}: {exc.message}")

    headers = None
    if exc.http_status == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(exc.message, exc.code, exc.details),
        headers=headers,
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors; details are logged, never returned"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("An unexpected error occurred", "INTERNAL_SERVER_ERROR"),
    )

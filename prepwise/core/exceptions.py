"""
Custom exceptions for the PrepWise backend.

This module defines a small hierarchy of exceptions, each carrying the HTTP
status it maps to, plus the FastAPI handlers that render them as the JSON
envelope the front-end and the voice agent expect.
"""
import logging
from typing import Optional
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# ============================================================================
# Custom Exception Classes
# ============================================================================

class AppError(Exception):
    """Base exception for all application errors."""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"success": False, "error": {"message": self.message, **self.details}}


class InvalidPayloadError(AppError):
    """Raised when a generation request is missing one of its required fields."""
    status_code = 400


class ExtractionError(AppError):
    """
    Raised when model output cannot be turned into the expected JSON value.

    The untouched model text is kept on ``raw`` and echoed in the response
    payload so bad generations can be diagnosed from the client side.
    """

    def __init__(self, message: str, raw: str):
        self.raw = raw
        super().__init__(message, details={"raw": raw})


class ConfigurationError(AppError):
    """Exception raised when configuration is invalid or missing."""
    pass


class NotFoundError(AppError):
    """Raised when a requested document does not exist."""
    status_code = 404


# ============================================================================
# FastAPI Exception Handlers
# ============================================================================

async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}")
    else:
        logger.warning(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": {"message": str(exc)}},
    )

INVALID_REQUEST_MESSAGE = "Invalid request."

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Request validation failed: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": {"message": INVALID_REQUEST_MESSAGE}},
    )

async def http_exception_handler(request: Request, exc: HTTPException):
    logger.warning(f"HTTP exception: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": {"message": exc.detail}},
    )

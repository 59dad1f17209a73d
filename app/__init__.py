"""
App package - Application configuration and error taxonomy.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, DatabaseConfig
from app.exceptions import (
    AppError,
    ServiceValidationError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    "settings",
    "DatabaseConfig",
    "AppError",
    "ServiceValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
]

from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP status.

    Attributes:
        message: human-readable message, safe to return to the caller
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = "Error", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class UnauthorizedError(AppError):
    """Raised when the bearer token is missing, malformed, tampered with or expired."""

    http_status = 401
    default_code = "UNAUTHORIZED"

    def __init__(self, message: str = "Not authorized", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class ForbiddenError(AppError):
    """Raised when an authenticated user targets a resource they do not own."""

    http_status = 403
    default_code = "FORBIDDEN"

    def __init__(self, message: str = "Forbidden", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class NotFoundError(AppError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class ConflictError(AppError):
    """Raised when a unique constraint is violated (duplicate email or nickname).

    ``field`` names the colliding column when it is known.
    """

    http_status = 409
    default_code = "CONFLICT"

    def __init__(self, message: str = "Conflict", field: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)
        self.field = field

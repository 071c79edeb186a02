"""
Application exceptions mapped onto the API error envelope.
"""
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes returned in the ``error.code`` field."""

    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base exception carrying an error code and HTTP status."""

    def __init__(self, message: str, error_code: ErrorCode, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code


class UnauthorizedError(AppException):
    """Raised when the session is missing or invalid."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, ErrorCode.UNAUTHORIZED, 401)


class ForbiddenError(AppException):
    """Raised when an authenticated user lacks the required role."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, ErrorCode.FORBIDDEN, 403)


class NotFoundError(AppException):
    """Raised when a resource is missing or not visible to the caller."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, ErrorCode.NOT_FOUND, 404)


class ConflictError(AppException):
    """Raised when a unique resource already exists."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFLICT, 409)

"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=422)


class ForbiddenError(AppError):
    """Raised when the caller's role lacks the needed capability."""

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message, status_code=403)


class UpstreamError(AppError):
    """Raised at the handler edge when the inventory API cannot be read."""

    def __init__(self, message: str = "Upstream API request failed"):
        super().__init__(message, status_code=502)


class PaginationError(AppError):
    """Raised when a list endpoint returns a page we cannot walk."""

    def __init__(self, message: str = "Malformed page response"):
        super().__init__(message, status_code=502)


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a JSON proxy integration response."""
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"message": str(error), "status": "error"}),
    }

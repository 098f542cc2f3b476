"""Custom exceptions for the application."""
from typing import Any, Optional
from fastapi import HTTPException, status
from utils.response import error_response


class PgDeskException(Exception):
    """Base exception for the pgdesk server."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class ResourceNotFoundError(PgDeskException):
    """Resource not found exception."""
    pass


class ValidationError(PgDeskException):
    """Validation error exception."""
    pass


def not_found(resource: str = "Resource") -> HTTPException:
    """Create 404 not found exception."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=error_response(f"{resource} not found")
    )


def bad_request(detail: str, details: Any = None) -> HTTPException:
    """Create 400 bad request exception."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=error_response(detail, details)
    )


def internal_error(detail: str = "Internal server error", details: Any = None) -> HTTPException:
    """Create 500 internal server error exception."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_response(detail, details)
    )

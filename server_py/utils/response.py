"""Response utilities."""
from typing import Any, Optional
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by mutating endpoints."""
    message: str


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str
    details: Optional[Any] = None


def message_response(message: str, **extra: Any) -> dict:
    """Create an acknowledgement response."""
    return {"message": message, **extra}


def error_response(error: str, details: Any = None) -> dict:
    """Create error response."""
    body = {"error": error}
    if details is not None:
        body["details"] = details
    return body


# OpenAPI documentation of the error bodies every router can return
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
    404: {"model": ErrorResponse, "description": "Table or row not found"},
    500: {"model": ErrorResponse, "description": "Database error"},
}

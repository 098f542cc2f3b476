"""Utilities module."""

from .exceptions import (
    PgDeskException,
    ResourceNotFoundError,
    ValidationError,
)
from .serialization import to_json_value, rows_to_json

__all__ = [
    'PgDeskException',
    'ResourceNotFoundError',
    'ValidationError',
    'to_json_value',
    'rows_to_json',
]

"""Database connection management package."""
from core.db.postgres import (
    get_postgres_connection,
    open_connection,
    normalize_connection_string,
    mask_connection_string,
    describe_database_error,
)

__all__ = [
    "get_postgres_connection",
    "open_connection",
    "normalize_connection_string",
    "mask_connection_string",
    "describe_database_error",
]

"""PostgreSQL connection management.

Every request carries its own connection string, so connections are opened
per request and closed as soon as the request's statements are done. The
driver and the server own pooling, locking and transactions.
"""
import re
from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2.extras import RealDictCursor

from core.config import get_settings
from core.logging import log_debug


_PASSWORD_IN_URI = re.compile(r"(://[^:/@]+:)[^@]+(@)")
_PASSWORD_IN_DSN = re.compile(r"(password\s*=\s*)('[^']*'|\S+)", re.IGNORECASE)


def normalize_connection_string(connection_string: str) -> str:
    """Clean up a connection string pasted from a shell or a config file."""
    connection_string = connection_string.strip()
    if connection_string.lower().startswith("psql "):
        connection_string = connection_string[5:].strip()
    if len(connection_string) >= 2 and connection_string[0] == connection_string[-1] \
            and connection_string[0] in ("'", '"'):
        connection_string = connection_string[1:-1].strip()
    return connection_string


def mask_connection_string(connection_string: str) -> str:
    """Hide the password of a URI or key/value connection string."""
    masked = _PASSWORD_IN_URI.sub(r"\1****\2", connection_string)
    return _PASSWORD_IN_DSN.sub(r"\1****", masked)


def get_postgres_connection(connection_string: str, statement_timeout_ms: Optional[int] = None):
    """Open a new PostgreSQL connection returning dict-like rows."""
    settings = get_settings()
    if statement_timeout_ms is None:
        statement_timeout_ms = settings.pg_statement_timeout_ms
    dsn = normalize_connection_string(connection_string)
    log_debug(f"Opening connection to {mask_connection_string(dsn)}", "postgres")
    return psycopg2.connect(
        dsn,
        connect_timeout=settings.pg_connect_timeout,
        options=f"-c statement_timeout={int(statement_timeout_ms)}",
        cursor_factory=RealDictCursor,
        application_name="pgdesk",
    )


@contextmanager
def open_connection(connection_string: str, statement_timeout_ms: Optional[int] = None) -> Iterator:
    """Yield a connection that commits on success and rolls back on error."""
    conn = get_postgres_connection(connection_string, statement_timeout_ms)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def describe_database_error(exc: Exception) -> str:
    """Driver/server message for an error, without trailing newlines."""
    return str(exc).strip() or exc.__class__.__name__

"""Pytest configuration and shared fixtures."""

import pytest
from unittest.mock import MagicMock, patch

from psycopg2 import sql


def _render(composable):
    """Flatten a psycopg2.sql composable into text without a live connection."""
    if isinstance(composable, sql.Composed):
        return "".join(_render(part) for part in composable.seq)
    if isinstance(composable, sql.Identifier):
        return ".".join('"%s"' % s.replace('"', '""') for s in composable.strings)
    if isinstance(composable, sql.Literal):
        value = composable.wrapped
        if isinstance(value, str):
            return "'%s'" % value.replace("'", "''")
        return str(value)
    if isinstance(composable, sql.Placeholder):
        return "%s" if composable.name is None else "%%(%s)s" % composable.name
    if isinstance(composable, sql.SQL):
        return composable.string
    raise TypeError(f"cannot render {composable!r}")


@pytest.fixture
def render_sql():
    """Render composed SQL as the server would receive it."""
    return _render


@pytest.fixture
def mock_cursor():
    """Cursor returned by ``with conn.cursor() as cur``."""
    cursor = MagicMock()
    cursor.description = None
    cursor.rowcount = 0
    cursor.statusmessage = ""
    return cursor


@pytest.fixture
def mock_connection(mock_cursor):
    connection = MagicMock()
    connection.cursor.return_value.__enter__.return_value = mock_cursor
    return connection


@pytest.fixture
def mock_connect(mock_connection):
    """Patch psycopg2.connect as used by core.db.postgres."""
    with patch("core.db.postgres.psycopg2.connect", return_value=mock_connection) as connect:
        yield connect


@pytest.fixture
def executed_sql(mock_cursor, render_sql):
    """Rendered text of every statement the mock cursor executed, in order."""
    def _executed():
        statements = []
        for call in mock_cursor.execute.call_args_list:
            statement = call.args[0]
            statements.append(statement if isinstance(statement, str) else render_sql(statement))
        return statements
    return _executed


@pytest.fixture
def client(tmp_path):
    """API client whose saved-data store lives in a temporary directory."""
    from fastapi.testclient import TestClient
    from app import app
    from repositories.connection_store import ConnectionStore, get_connection_store

    app.dependency_overrides[get_connection_store] = lambda: ConnectionStore(str(tmp_path / "data.json"))
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

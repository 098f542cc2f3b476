"""Tests for schema introspection."""

import datetime

import pytest

from repositories import catalog_repository
from utils.exceptions import ResourceNotFoundError


class TestListTablesBySchema:

    def test_groups_tables_in_order(self, mock_connect, mock_cursor):
        mock_cursor.fetchall.return_value = [
            {"table_schema": "public", "table_name": "accounts"},
            {"table_schema": "public", "table_name": "users"},
            {"table_schema": "sales", "table_name": "orders"},
        ]

        result = catalog_repository.list_tables_by_schema("postgresql://h/db")

        assert result == {"public": ["accounts", "users"], "sales": ["orders"]}
        assert list(result) == ["public", "sales"]

    def test_empty_database(self, mock_connect, mock_cursor):
        mock_cursor.fetchall.return_value = []
        assert catalog_repository.list_tables_by_schema("postgresql://h/db") == {}

    def test_system_schemas_excluded(self):
        assert "'pg_catalog', 'information_schema'" in catalog_repository.LIST_TABLES_SQL
        assert "BASE TABLE" in catalog_repository.LIST_TABLES_SQL


class TestGetTableStructure:

    def test_passes_schema_and_table_as_parameters(self, mock_connect, mock_cursor):
        mock_cursor.fetchall.return_value = [
            {
                "column_name": "id",
                "data_type": "integer",
                "is_nullable": "NO",
                "column_default": "nextval('users_id_seq'::regclass)",
                "character_maximum_length": None,
                "primary_key": True,
            },
        ]

        result = catalog_repository.get_table_structure("postgresql://h/db", "public", "users")

        query, params = mock_cursor.execute.call_args.args
        assert query == catalog_repository.TABLE_STRUCTURE_SQL
        assert params == ("public", "users")
        assert result[0]["column_name"] == "id"
        assert result[0]["primary_key"] is True


class TestGetTableInfo:

    def test_maps_sizes(self, mock_connect, mock_cursor):
        mock_cursor.fetchone.return_value = {
            "type": "BASE TABLE",
            "estimated_rows": 1200,
            "total_size": 155648,
            "table_size": 98304,
            "indexes_size": 40960,
        }

        info = catalog_repository.get_table_info("postgresql://h/db", "public", "users")

        assert info == {
            "type": "BASE TABLE",
            "estimatedRowsCount": 1200,
            "totalSizeBytes": 155648,
            "sizeDetails": {"tableSize": 98304, "indexesSize": 40960},
        }

    def test_unknown_table(self, mock_connect, mock_cursor):
        mock_cursor.fetchone.return_value = None

        with pytest.raises(ResourceNotFoundError) as exc_info:
            catalog_repository.get_table_info("postgresql://h/db", "public", "ghost")

        assert "public.ghost" in exc_info.value.message

    def test_estimate_never_negative(self):
        assert "GREATEST(cls.reltuples, 0)" in catalog_repository.TABLE_INFO_SQL


def test_get_server_status(mock_connect, mock_cursor):
    now = datetime.datetime(2026, 1, 2, 3, 4, 5)
    mock_cursor.fetchone.return_value = {"now": now, "database": "app", "server_version": "16.2"}

    status = catalog_repository.get_server_status("postgresql://h/db")

    assert status == {"now": now, "database": "app", "server_version": "16.2"}

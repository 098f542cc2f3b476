"""Services module."""
from services.ddl_builder import ColumnSpec
from services import query_runner, schema_editor

__all__ = [
    "ColumnSpec",
    "query_runner",
    "schema_editor",
]

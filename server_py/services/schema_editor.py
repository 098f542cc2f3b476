"""Column editor: runs the DDL built by ``services.ddl_builder``."""
from core.db.postgres import open_connection
from core.logging import log_info
from services.ddl_builder import (
    ColumnSpec,
    build_add_column,
    build_drop_column,
    build_edit_column,
)


def add_column(connection_string: str, schema: str, table: str, name: str, spec: ColumnSpec) -> None:
    statement = build_add_column(schema, table, name, spec)
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(statement)
    log_info(f"Added column {name} to {schema}.{table}", "schema_editor")


def drop_column(connection_string: str, schema: str, table: str, column: str) -> None:
    statement = build_drop_column(schema, table, column)
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(statement)
    log_info(f"Dropped column {column} from {schema}.{table}", "schema_editor")


def edit_column(
    connection_string: str,
    schema: str,
    table: str,
    old_name: str,
    new_name: str,
    spec: ColumnSpec,
) -> None:
    """Rename and redefine a column atomically.

    All statements share one transaction; if any of them fails the
    connection rolls back and the column is left untouched.
    """
    statements = build_edit_column(schema, table, old_name, new_name, spec)
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            for statement in statements:
                cur.execute(statement)
    log_info(f"Edited column {old_name} -> {new_name} on {schema}.{table}", "schema_editor")

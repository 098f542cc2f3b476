"""Row-level access for the table content browser."""
from typing import Any, Dict, List, Optional

from psycopg2 import sql

from core.config import get_settings
from core.db.postgres import open_connection
from utils.exceptions import ResourceNotFoundError, ValidationError
from utils.serialization import row_to_json, rows_to_json


def _table(schema: str, table: str) -> sql.Identifier:
    return sql.Identifier(schema, table)


def build_select_page(
    schema: str,
    table: str,
    limit: int,
    offset: int = 0,
    order_by: Optional[str] = None,
    direction: str = "asc",
) -> sql.Composed:
    query = sql.SQL("SELECT * FROM {table}").format(table=_table(schema, table))
    if order_by:
        order = "DESC" if direction.lower() == "desc" else "ASC"
        query = query + sql.SQL(" ORDER BY {column} " + order).format(column=sql.Identifier(order_by))
    return query + sql.SQL(" LIMIT {limit} OFFSET {offset}").format(
        limit=sql.Literal(int(limit)),
        offset=sql.Literal(int(offset)),
    )


def build_update_row(schema: str, table: str, key_column: str, updates: Dict[str, Any]) -> sql.Composed:
    if not updates:
        raise ValidationError("updates must contain at least one column")
    assignments = sql.SQL(", ").join(
        sql.SQL("{column} = {value}").format(column=sql.Identifier(column), value=sql.Placeholder())
        for column in updates
    )
    return sql.SQL("UPDATE {table} SET {assignments} WHERE {key} = {value} RETURNING *").format(
        table=_table(schema, table),
        assignments=assignments,
        key=sql.Identifier(key_column),
        value=sql.Placeholder(),
    )


def build_delete_row(schema: str, table: str, key_column: str) -> sql.Composed:
    return sql.SQL("DELETE FROM {table} WHERE {key} = {value}").format(
        table=_table(schema, table),
        key=sql.Identifier(key_column),
        value=sql.Placeholder(),
    )


def build_insert_row(schema: str, table: str, values: Dict[str, Any]) -> sql.Composed:
    if not values:
        return sql.SQL("INSERT INTO {table} DEFAULT VALUES RETURNING *").format(table=_table(schema, table))
    return sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING *").format(
        table=_table(schema, table),
        columns=sql.SQL(", ").join(sql.Identifier(column) for column in values),
        values=sql.SQL(", ").join(sql.Placeholder() * len(values)),
    )


def get_rows(
    connection_string: str,
    schema: str,
    table: str,
    limit: Optional[int] = None,
    offset: int = 0,
    order_by: Optional[str] = None,
    direction: str = "asc",
) -> List[Dict]:
    """Fetch one page of rows; the page size is capped by the settings."""
    settings = get_settings()
    page_size = min(limit or settings.table_page_size, settings.table_max_rows)
    query = build_select_page(schema, table, page_size, offset, order_by, direction)
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(query)
            return rows_to_json(cur.fetchall())


def update_row(
    connection_string: str,
    schema: str,
    table: str,
    key_column: str,
    key_value: Any,
    updates: Dict[str, Any],
) -> Dict:
    query = build_update_row(schema, table, key_column, updates)
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(query, [*updates.values(), key_value])
            row = cur.fetchone()
    if row is None:
        raise ResourceNotFoundError(f"Row with {key_column} = {key_value}")
    return row_to_json(row)


def delete_row(connection_string: str, schema: str, table: str, key_column: str, key_value: Any) -> int:
    query = build_delete_row(schema, table, key_column)
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(query, (key_value,))
            deleted = cur.rowcount
    if not deleted:
        raise ResourceNotFoundError(f"Row with {key_column} = {key_value}")
    return deleted


def insert_row(connection_string: str, schema: str, table: str, values: Dict[str, Any]) -> Dict:
    query = build_insert_row(schema, table, values)
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(query, list(values.values()) or None)
            return row_to_json(cur.fetchone())

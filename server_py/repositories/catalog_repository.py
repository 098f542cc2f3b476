"""Schema introspection over information_schema and the system catalogs."""
from typing import Dict, List

from core.db.postgres import open_connection
from utils.exceptions import ResourceNotFoundError


SERVER_STATUS_SQL = """
    SELECT NOW() AS now,
           current_database() AS database,
           current_setting('server_version') AS server_version
"""

LIST_TABLES_SQL = """
    SELECT table_schema, table_name
    FROM information_schema.tables
    WHERE table_type = 'BASE TABLE'
      AND table_schema NOT IN ('pg_catalog', 'information_schema')
      AND table_schema NOT LIKE 'pg\\_toast%'
    ORDER BY table_schema, table_name
"""

# primary_key is an EXISTS so a column that also takes part in foreign keys
# or unique constraints is still listed once.
TABLE_STRUCTURE_SQL = """
    SELECT
        c.column_name,
        c.data_type,
        c.is_nullable,
        c.column_default,
        c.character_maximum_length,
        EXISTS (
            SELECT 1
            FROM information_schema.table_constraints tc
            JOIN information_schema.key_column_usage kcu
              ON kcu.constraint_name = tc.constraint_name
             AND kcu.constraint_schema = tc.constraint_schema
             AND kcu.table_name = tc.table_name
            WHERE tc.constraint_type = 'PRIMARY KEY'
              AND tc.table_schema = c.table_schema
              AND tc.table_name = c.table_name
              AND kcu.column_name = c.column_name
        ) AS primary_key
    FROM information_schema.columns c
    WHERE c.table_schema = %s
      AND c.table_name = %s
    ORDER BY c.ordinal_position
"""

TABLE_INFO_SQL = """
    SELECT
        t.table_type AS type,
        GREATEST(cls.reltuples, 0)::bigint AS estimated_rows,
        pg_total_relation_size(cls.oid) AS total_size,
        pg_relation_size(cls.oid) AS table_size,
        pg_indexes_size(cls.oid) AS indexes_size
    FROM information_schema.tables t
    JOIN pg_catalog.pg_namespace ns ON ns.nspname = t.table_schema
    JOIN pg_catalog.pg_class cls
      ON cls.relnamespace = ns.oid
     AND cls.relname = t.table_name
    WHERE t.table_schema = %s
      AND t.table_name = %s
"""


def get_server_status(connection_string: str) -> Dict:
    """Ping the server; returns its clock, database name and version."""
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(SERVER_STATUS_SQL)
            return dict(cur.fetchone())


def list_tables_by_schema(connection_string: str) -> Dict[str, List[str]]:
    """Map each user schema to its base tables, both sorted by name."""
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(LIST_TABLES_SQL)
            rows = cur.fetchall()

    grouped: Dict[str, List[str]] = {}
    for row in rows:
        grouped.setdefault(row["table_schema"], []).append(row["table_name"])
    return grouped


def get_table_structure(connection_string: str, schema: str, table: str) -> List[Dict]:
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(TABLE_STRUCTURE_SQL, (schema, table))
            return [dict(row) for row in cur.fetchall()]


def get_table_info(connection_string: str, schema: str, table: str) -> Dict:
    """Table type, planner row estimate and on-disk sizes in bytes."""
    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(TABLE_INFO_SQL, (schema, table))
            row = cur.fetchone()

    if row is None:
        raise ResourceNotFoundError(f"Table {schema}.{table}")

    return {
        "type": row["type"],
        "estimatedRowsCount": int(row["estimated_rows"] or 0),
        "totalSizeBytes": int(row["total_size"] or 0),
        "sizeDetails": {
            "tableSize": int(row["table_size"] or 0),
            "indexesSize": int(row["indexes_size"] or 0),
        },
    }

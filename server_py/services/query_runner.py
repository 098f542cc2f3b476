"""Ad-hoc SQL execution for the query tab."""
from typing import Any, Dict

from core.config import get_settings
from core.db.postgres import open_connection
from core.logging import log_info, log_warning
from utils.serialization import rows_to_json


def run_query(connection_string: str, query: str) -> Dict[str, Any]:
    """Run the administrator's SQL in a single transaction.

    The SQL is passed to the server untouched (no parameters, so ``%`` needs
    no escaping). Result sets are cut at ``query_max_rows``; statements
    without one report only their status tag and affected row count.
    """
    max_rows = get_settings().query_max_rows

    with open_connection(connection_string) as conn:
        with conn.cursor() as cur:
            cur.execute(query)
            command = cur.statusmessage
            row_count = cur.rowcount

            if cur.description is None:
                log_info(f"Query executed: {command}", "query_runner")
                return {
                    "rows": [],
                    "fields": [],
                    "rowCount": row_count,
                    "command": command,
                    "truncated": False,
                }

            fields = [column.name for column in cur.description]
            rows = cur.fetchmany(max_rows + 1)

    truncated = len(rows) > max_rows
    if truncated:
        rows = rows[:max_rows]
        log_warning(f"Query result truncated to {max_rows} rows", "query_runner")

    log_info(f"Query executed: {command}", "query_runner")
    return {
        "rows": rows_to_json(rows),
        "fields": fields,
        "rowCount": row_count,
        "command": command,
        "truncated": truncated,
    }

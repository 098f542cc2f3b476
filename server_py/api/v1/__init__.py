"""API v1 routers."""

from . import connection
from . import schema
from . import columns
from . import rows
from . import query

__all__ = [
    "connection",
    "schema",
    "columns",
    "rows",
    "query",
]

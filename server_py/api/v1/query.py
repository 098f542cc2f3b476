"""Query runner API router."""
import psycopg2
from fastapi import APIRouter

from core.db.postgres import describe_database_error
from core.logging import log_error
from schemas.requests_database import RunQueryRequest
from services import query_runner
from utils.exceptions import internal_error
from utils.response import ERROR_RESPONSES

router = APIRouter(tags=["query"], responses=ERROR_RESPONSES)


@router.post("/runQuery")
def run_query(request: RunQueryRequest):
    """
    Execute ad-hoc SQL.

    Returns:
        rows, fields, rowCount, command tag and a truncation flag
    """
    try:
        return query_runner.run_query(request.connectionString, request.query)
    except psycopg2.Error as e:
        log_error("Query failed", "query", e)
        raise internal_error(describe_database_error(e))

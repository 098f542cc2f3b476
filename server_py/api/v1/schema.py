"""Schema introspection API router."""
import psycopg2
from fastapi import APIRouter

from core.db.postgres import describe_database_error
from core.logging import log_error
from repositories import catalog_repository
from schemas.requests_database import ConnectDatabaseRequest, TableRequest
from utils.exceptions import ResourceNotFoundError, internal_error, not_found
from utils.response import ERROR_RESPONSES

router = APIRouter(tags=["schema"], responses=ERROR_RESPONSES)


@router.post("/getTablesAndSchemas")
def get_tables_and_schemas(request: ConnectDatabaseRequest):
    """List base tables grouped by schema."""
    try:
        return catalog_repository.list_tables_by_schema(request.connectionString)
    except psycopg2.Error as e:
        log_error("Failed to get tables and schemas", "schema", e)
        raise internal_error("Failed to get tables and schemas", describe_database_error(e))


@router.post("/getTableStructure")
def get_table_structure(request: TableRequest):
    """Columns of a table in ordinal order, with primary key flags."""
    try:
        return catalog_repository.get_table_structure(
            request.connectionString, request.schema_, request.table
        )
    except psycopg2.Error as e:
        log_error(f"Failed to get structure of {request.schema_}.{request.table}", "schema", e)
        raise internal_error("Failed to get table structure", describe_database_error(e))


@router.post("/getTableInfo")
def get_table_info(request: TableRequest):
    """Table type, estimated row count and sizes."""
    try:
        return catalog_repository.get_table_info(
            request.connectionString, request.schema_, request.table
        )
    except ResourceNotFoundError as e:
        raise not_found(e.message)
    except psycopg2.Error as e:
        log_error(f"Failed to get info of {request.schema_}.{request.table}", "schema", e)
        raise internal_error("Failed to get table info", describe_database_error(e))

"""Table content API router."""
import psycopg2
from fastapi import APIRouter

from core.db.postgres import describe_database_error
from core.logging import log_error, log_info
from repositories import table_data_repository
from schemas.requests_database import (
    DeleteRowRequest,
    EditRowRequest,
    InsertRowRequest,
    TableValuesRequest,
)
from utils.exceptions import (
    ResourceNotFoundError,
    ValidationError,
    bad_request,
    internal_error,
    not_found,
)
from utils.response import ERROR_RESPONSES, message_response

router = APIRouter(tags=["rows"], responses=ERROR_RESPONSES)


@router.post("/getTableValues")
def get_table_values(request: TableValuesRequest):
    """One page of rows as objects keyed by column name."""
    try:
        return table_data_repository.get_rows(
            request.connectionString,
            request.schema_,
            request.table,
            limit=request.limit,
            offset=request.offset,
            order_by=request.orderBy,
            direction=request.orderDirection,
        )
    except psycopg2.Error as e:
        log_error(f"Failed to get values of {request.schema_}.{request.table}", "rows", e)
        raise internal_error("Failed to get table values", describe_database_error(e))


@router.post("/editRow")
def edit_row(request: EditRowRequest):
    try:
        row = table_data_repository.update_row(
            request.connectionString,
            request.schema_,
            request.table,
            request.primaryKey,
            request.primaryKeyValue,
            request.updates,
        )
    except ValidationError as e:
        raise bad_request(e.message)
    except ResourceNotFoundError as e:
        raise not_found(e.message)
    except psycopg2.Error as e:
        log_error(f"Failed to edit row in {request.schema_}.{request.table}", "rows", e)
        raise internal_error(describe_database_error(e))

    log_info(f"Updated {sorted(request.updates)} in {request.schema_}.{request.table}", "rows")
    return message_response("Row updated successfully", row=row)


@router.post("/deleteRow")
def delete_row(request: DeleteRowRequest):
    try:
        table_data_repository.delete_row(
            request.connectionString,
            request.schema_,
            request.table,
            request.primaryKey,
            request.primaryKeyValue,
        )
    except ResourceNotFoundError as e:
        raise not_found(e.message)
    except psycopg2.Error as e:
        log_error(f"Failed to delete row in {request.schema_}.{request.table}", "rows", e)
        raise internal_error(describe_database_error(e))

    log_info(f"Deleted row from {request.schema_}.{request.table}", "rows")
    return message_response("Row deleted successfully")


@router.post("/insertRow")
def insert_row(request: InsertRowRequest):
    try:
        row = table_data_repository.insert_row(
            request.connectionString, request.schema_, request.table, request.values
        )
    except psycopg2.Error as e:
        log_error(f"Failed to insert row in {request.schema_}.{request.table}", "rows", e)
        raise internal_error(describe_database_error(e))
    return message_response("Row inserted successfully", row=row)

"""Column editor API router."""
import psycopg2
from fastapi import APIRouter

from core.db.postgres import describe_database_error
from core.logging import log_error
from schemas.requests_database import (
    AddColumnRequest,
    ColumnDefinition,
    DeleteColumnRequest,
    EditColumnRequest,
)
from services import schema_editor
from services.ddl_builder import ColumnSpec
from utils.exceptions import ValidationError, bad_request, internal_error
from utils.response import ERROR_RESPONSES, MessageResponse, message_response

router = APIRouter(tags=["columns"], responses=ERROR_RESPONSES)


def _column_spec(request: ColumnDefinition) -> ColumnSpec:
    return ColumnSpec(
        type=request.type,
        default_value=request.defaultValue,
        max_length=request.maxLength,
        allow_null=request.allowNull,
    )


@router.post("/addColumn", response_model=MessageResponse)
def add_column(request: AddColumnRequest):
    try:
        schema_editor.add_column(
            request.connectionString,
            request.schema_,
            request.table,
            request.name,
            _column_spec(request),
        )
    except ValidationError as e:
        raise bad_request(e.message)
    except psycopg2.Error as e:
        log_error(f"Failed to add column {request.name}", "columns", e)
        raise internal_error(describe_database_error(e))
    return message_response("Column added successfully")


@router.post("/deleteColumn", response_model=MessageResponse)
def delete_column(request: DeleteColumnRequest):
    try:
        schema_editor.drop_column(
            request.connectionString, request.schema_, request.table, request.column
        )
    except psycopg2.Error as e:
        log_error(f"Failed to delete column {request.column}", "columns", e)
        raise internal_error(describe_database_error(e))
    return message_response(
        f"Column {request.column} deleted from table {request.schema_}.{request.table}"
    )


@router.post("/editColumn", response_model=MessageResponse)
def edit_column(request: EditColumnRequest):
    """Rename and redefine a column; all-or-nothing."""
    try:
        schema_editor.edit_column(
            request.connectionString,
            request.schema_,
            request.table,
            request.oldName,
            request.newName,
            _column_spec(request),
        )
    except ValidationError as e:
        raise bad_request(e.message)
    except psycopg2.Error as e:
        log_error(f"Failed to edit column {request.oldName}", "columns", e)
        raise internal_error(describe_database_error(e))
    return message_response("Column edited successfully")

"""Request models for the database administration endpoints.

Field names follow the camelCase the desktop UI sends. Required strings
reject empty values, which the UI uses for "not filled in".
"""
from typing import Annotated, Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, Field


RequiredStr = Annotated[str, Field(min_length=1)]


class ConnectDatabaseRequest(BaseModel):
    """Request model for database connection."""
    connectionString: RequiredStr


class TableRequest(ConnectDatabaseRequest):
    """Request addressing one table."""
    schema_: str = Field(..., min_length=1, alias="schema")
    table: RequiredStr

    model_config = {"populate_by_name": True}


class ColumnDefinition(BaseModel):
    """Column attributes shared by add and edit."""
    type: RequiredStr
    defaultValue: Optional[Union[str, int, float, bool]] = None
    maxLength: Optional[Union[int, str]] = None
    allowNull: bool = False


class AddColumnRequest(TableRequest, ColumnDefinition):
    """Request to add a column."""
    name: RequiredStr


class EditColumnRequest(TableRequest, ColumnDefinition):
    """Request to rename and/or redefine a column."""
    oldName: RequiredStr
    newName: RequiredStr


class DeleteColumnRequest(TableRequest):
    """Request to drop a column."""
    column: RequiredStr


class TableValuesRequest(TableRequest):
    """Request for a page of table rows."""
    limit: Optional[int] = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)
    orderBy: Optional[str] = None
    orderDirection: Literal["asc", "desc", "ASC", "DESC"] = "asc"


class RowKeyRequest(TableRequest):
    """Request addressing one row by its key column."""
    primaryKey: str = Field(default="id", min_length=1)
    primaryKeyValue: Any


class EditRowRequest(RowKeyRequest):
    """Request to update columns of one row."""
    updates: Dict[str, Any]


class DeleteRowRequest(RowKeyRequest):
    """Request to delete one row."""
    pass


class InsertRowRequest(TableRequest):
    """Request to insert one row."""
    values: Dict[str, Any] = Field(default_factory=dict)


class RunQueryRequest(ConnectDatabaseRequest):
    """Request to run ad-hoc SQL."""
    query: RequiredStr

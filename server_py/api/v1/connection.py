"""Connection test and saved connection data API router."""
from typing import Any, Dict

import psycopg2
from fastapi import APIRouter, Body, Depends

from core.db.postgres import describe_database_error, mask_connection_string
from core.logging import log_error, log_info
from repositories import catalog_repository
from repositories.connection_store import ConnectionStore, get_connection_store
from schemas.requests_database import ConnectDatabaseRequest
from utils.exceptions import internal_error
from utils.response import ERROR_RESPONSES, message_response
from utils.serialization import to_json_value

router = APIRouter(tags=["connection"], responses=ERROR_RESPONSES)


@router.post("/connect")
def connect_database(request: ConnectDatabaseRequest):
    """
    Check that a connection string reaches a PostgreSQL server.

    Returns:
        Server time, database name and server version
    """
    masked = mask_connection_string(request.connectionString)
    try:
        status = catalog_repository.get_server_status(request.connectionString)
    except psycopg2.Error as e:
        log_error(f"Connection to {masked} failed", "connection", e)
        raise internal_error("Failed to connect to the database", describe_database_error(e))

    log_info(f"Connected to {masked}", "connection")
    return message_response(
        "Connection successful!",
        serverTime=to_json_value(status["now"]),
        database=status["database"],
        serverVersion=status["server_version"],
    )


@router.get("/loadData")
def load_data(store: ConnectionStore = Depends(get_connection_store)):
    """Return what the UI saved last time (e.g. ``connectUrl``)."""
    try:
        return store.load()
    except OSError as e:
        log_error("Failed to load saved data", "connection", e)
        raise internal_error("Failed to load saved data", str(e))


@router.post("/saveData")
def save_data(
    data: Dict[str, Any] = Body(...),
    store: ConnectionStore = Depends(get_connection_store),
):
    """Merge the posted keys into the saved data."""
    try:
        return store.save(data)
    except OSError as e:
        log_error("Failed to save data", "connection", e)
        raise internal_error("Failed to save data", str(e))


@router.post("/clearData")
def clear_data(store: ConnectionStore = Depends(get_connection_store)):
    """Forget the saved data."""
    try:
        removed = store.clear()
    except OSError as e:
        log_error("Failed to clear data", "connection", e)
        raise internal_error("Failed to clear data", str(e))
    return message_response("Saved data cleared" if removed else "Nothing to clear")

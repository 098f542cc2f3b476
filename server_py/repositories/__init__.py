"""Repositories module."""
from repositories import catalog_repository, table_data_repository
from repositories.connection_store import ConnectionStore, get_connection_store

__all__ = [
    "catalog_repository",
    "table_data_repository",
    "ConnectionStore",
    "get_connection_store",
]

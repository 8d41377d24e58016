"""
Database module - client registry and connection management.
"""
from mongo_mapper.database.registry import ClientManager, DEFAULT_CLIENT_NAME
from mongo_mapper.database.connections import (
    get_client_manager,
    connect,
    create_repository,
    close_connections,
)

__all__ = [
    "ClientManager",
    "DEFAULT_CLIENT_NAME",
    "get_client_manager",
    "connect",
    "create_repository",
    "close_connections",
]

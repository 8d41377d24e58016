"""
Client registry.

Maps logical client names to driver clients and their default database,
and caches collection handles per (client, database, collection).
"""
import logging
from typing import Any, Optional

from mongo_mapper.core.exceptions import DuplicateClientError, UnknownClientError
from mongo_mapper.models.client import RegisteredClient

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_NAME = "default"


class ClientManager:
    """Registry of named driver clients."""

    def __init__(self):
        self._clients: dict[str, RegisteredClient] = {}

    def register_client(
        self, client: Any, default_database: str, name: Optional[str] = None
    ) -> "ClientManager":
        """
        Register a driver client under a name.

        Args:
            client: Driver client, e.g. AsyncIOMotorClient
            default_database: Database used when a lookup does not name one
            name: Logical client name, "default" when omitted

        Returns:
            The manager, for chaining

        Raises:
            DuplicateClientError: The name is already registered
        """
        name = name or DEFAULT_CLIENT_NAME
        if name in self._clients:
            raise DuplicateClientError(f'Client with name "{name}" already exists.')

        self._clients[name] = RegisteredClient(
            name=name,
            default_database=default_database,
            client=client,
        )
        logger.info("Registered client %r (default database %r)", name, default_database)
        return self

    def has_client(self, name: str = DEFAULT_CLIENT_NAME) -> bool:
        return name in self._clients

    def get_client(self, name: Optional[str] = None) -> Any:
        """Return the driver client registered under ``name``."""
        return self._get_registered(name or DEFAULT_CLIENT_NAME).client

    def get_collection(
        self,
        collection_name: str,
        client_name: Optional[str] = None,
        database_name: Optional[str] = None,
    ) -> Any:
        """
        Resolve a collection handle, reusing the cached one when present.

        Args:
            collection_name: Collection to open
            client_name: Registered client, "default" when omitted
            database_name: Database, the client's default when omitted

        Raises:
            UnknownClientError: The client name was never registered
        """
        registered = self._get_registered(client_name or DEFAULT_CLIENT_NAME)
        database_name = database_name or registered.default_database

        cache_key = (registered.name, database_name, collection_name)
        collection = registered.collection_cache.get(cache_key)
        if collection is None:
            collection = registered.client[database_name][collection_name]
            registered.collection_cache[cache_key] = collection
            logger.debug("Opened collection %s", ".".join(cache_key))
        return collection

    def close(self) -> None:
        """Close every registered client and forget them."""
        for registered in self._clients.values():
            registered.client.close()
            logger.info("Closed client %r", registered.name)
        self._clients.clear()

    def _get_registered(self, name: str) -> RegisteredClient:
        registered = self._clients.get(name)
        if registered is None:
            raise UnknownClientError(f'Client with name "{name}" does not exist.')
        return registered

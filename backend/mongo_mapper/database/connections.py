"""
Process-wide connection management.

Holds the default ClientManager used by ``connect`` and
``create_repository``.
"""
import logging
from typing import TYPE_CHECKING, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorClient

from mongo_mapper.config import get_settings
from mongo_mapper.core.exceptions import DuplicateClientError
from mongo_mapper.database.registry import ClientManager

if TYPE_CHECKING:
    from mongo_mapper.services.repository import Repository

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Global manager instance
_client_manager: Optional[ClientManager] = None


def get_client_manager() -> ClientManager:
    """Get or create the default client manager."""
    global _client_manager
    if _client_manager is None:
        _client_manager = ClientManager()
    return _client_manager


async def connect(
    uri: Optional[str] = None,
    default_database: Optional[str] = None,
    name: Optional[str] = None,
) -> AsyncIOMotorClient:
    """
    Create a MongoDB client and register it on the default manager.

    Missing arguments fall back to the configured settings.
    """
    settings = get_settings()
    name = name or settings.client_name
    client = AsyncIOMotorClient(uri or settings.mongo_uri)
    try:
        get_client_manager().register_client(
            client,
            default_database=default_database or settings.default_database,
            name=name,
        )
    except DuplicateClientError:
        client.close()
        raise
    logger.info("Connected client %r", name)
    return client


def create_repository(document_class: Type[T]) -> "Repository[T]":
    """Create a repository bound to the default manager."""
    # the repository module imports the registry package
    from mongo_mapper.services.repository import Repository

    return Repository(document_class, get_client_manager())


async def close_connections() -> None:
    """Close all registered clients."""
    global _client_manager
    if _client_manager is not None:
        _client_manager.close()
        _client_manager = None

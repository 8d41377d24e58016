"""
mongo-mapper - async object-document mapping for MongoDB.

Declare classes with ``@document`` / ``@embedded_document`` and field
markers, register clients on a ``ClientManager`` (or through ``connect``)
and use a ``Repository`` for CRUD operations.
"""
import logging

from mongo_mapper.core.exceptions import (
    MapperError,
    ConfigurationError,
    NotMappedError,
    NotADocumentError,
    DuplicateClientError,
    UnknownClientError,
    InvalidReferenceError,
    TypeMismatchError,
    InvalidArgumentError,
    InvalidIdentifierError,
)
from mongo_mapper.models.metadata import EmbedManyAs, FieldType
from mongo_mapper.decorators import document, embedded_document, Field, EmbedOne, EmbedMany
from mongo_mapper.serializers import to_document, to_model
from mongo_mapper.database.registry import ClientManager
from mongo_mapper.database.connections import (
    get_client_manager,
    connect,
    create_repository,
    close_connections,
)
from mongo_mapper.services.cursor import DocumentCursor
from mongo_mapper.services.repository import Repository

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MapperError",
    "ConfigurationError",
    "NotMappedError",
    "NotADocumentError",
    "DuplicateClientError",
    "UnknownClientError",
    "InvalidReferenceError",
    "TypeMismatchError",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "EmbedManyAs",
    "FieldType",
    "document",
    "embedded_document",
    "Field",
    "EmbedOne",
    "EmbedMany",
    "to_document",
    "to_model",
    "ClientManager",
    "get_client_manager",
    "connect",
    "create_repository",
    "close_connections",
    "DocumentCursor",
    "Repository",
]

"""
Pydantic models describing mapped classes and registered clients.
"""
from mongo_mapper.models.metadata import (
    CreateEmbedType,
    DocumentMetadata,
    EmbeddedDocumentMetadata,
    EmbedManyAs,
    FieldMetadata,
    FieldType,
    ToDocument,
    ToModel,
)
from mongo_mapper.models.client import ClientOptions, RegisteredClient

__all__ = [
    "CreateEmbedType",
    "DocumentMetadata",
    "EmbeddedDocumentMetadata",
    "EmbedManyAs",
    "FieldMetadata",
    "FieldType",
    "ToDocument",
    "ToModel",
    "ClientOptions",
    "RegisteredClient",
]

"""
Metadata descriptors attached to mapped classes and their fields.
"""
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

# (document instance) -> plain mongo document
ToDocument = Callable[[Any], dict]
# (plain mongo document) -> document instance
ToModel = Callable[[dict], Any]
# (raw value) -> embedded class or already built embedded instance
CreateEmbedType = Callable[[Any], Any]


class FieldType(str, Enum):
    """How a single field is translated between class and document."""
    FIELD = "field"
    EMBED_ONE = "embed_one"
    EMBED_ARRAY = "embed_array"
    EMBED_MAP = "embed_map"
    EMBED_OBJECT = "embed_object"


class EmbedManyAs(str, Enum):
    """Container used to hold many embedded documents."""
    ARRAY = "array"
    MAP = "map"
    OBJECT = "object"


class DocumentMetadata(BaseModel):
    """
    Collection binding of a document class.

    ``collection_name`` is optional here so that the registry can hold
    partially declared classes; ``assert_valid_document`` enforces it.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    collection_name: Optional[str] = Field(None, description="Bound collection name")
    client_name: Optional[str] = Field(None, description="Registered client to use")
    database_name: Optional[str] = Field(None, description="Overrides the client's default database")
    to_document: Optional[ToDocument] = Field(None, description="Custom class -> document hook")
    to_model: Optional[ToModel] = Field(None, description="Custom document -> class hook")


class EmbeddedDocumentMetadata(BaseModel):
    """Marks a class as embeddable. Embedded documents have no collection."""
    model_config = ConfigDict(arbitrary_types_allowed=True)


class FieldMetadata(BaseModel):
    """Declared treatment of one field of a mapped class."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(..., description="Attribute name, also used as document key")
    type: FieldType = Field(default=FieldType.FIELD)
    create_embed_type: Optional[CreateEmbedType] = Field(
        None,
        description="Returns the embedded instance to hydrate for a raw value",
    )

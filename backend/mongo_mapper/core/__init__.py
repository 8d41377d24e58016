"""
Core module - error taxonomy and runtime type classification.

The classifier depends on the metadata registry; import it from
``mongo_mapper.core.classifier`` directly.
"""
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
]

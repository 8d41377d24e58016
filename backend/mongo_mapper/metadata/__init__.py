"""
Metadata registry for documents, embedded documents and their fields.
"""
from mongo_mapper.metadata.registry import (
    assert_valid_document,
    define_document,
    define_embed_many_field,
    define_embed_one_field,
    define_embedded_document,
    define_field,
    get_document_metadata,
    get_field_metadata,
    has_document_metadata,
    has_embedded_document_metadata,
)

__all__ = [
    "assert_valid_document",
    "define_document",
    "define_embed_many_field",
    "define_embed_one_field",
    "define_embedded_document",
    "define_field",
    "get_document_metadata",
    "get_field_metadata",
    "has_document_metadata",
    "has_embedded_document_metadata",
]

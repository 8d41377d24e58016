"""
Metadata registry.

Process-wide tables mapping a class to its document / embedded document
metadata, and a (class, field name) pair to its field metadata. Entries are
written once when classes are declared and only read afterwards.

All lookups are keyed by class identity, never by class name.
"""
import logging
from typing import Any, Optional, Union

from mongo_mapper.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    NotMappedError,
)
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

logger = logging.getLogger(__name__)

_document_metadata: dict[type, DocumentMetadata] = {}
_embedded_document_metadata: dict[type, EmbeddedDocumentMetadata] = {}
_field_metadata: dict[type, dict[str, FieldMetadata]] = {}

_EMBED_MANY_FIELD_TYPES = {
    EmbedManyAs.ARRAY: FieldType.EMBED_ARRAY,
    EmbedManyAs.MAP: FieldType.EMBED_MAP,
    EmbedManyAs.OBJECT: FieldType.EMBED_OBJECT,
}


# ==================== Documents ====================

def define_document(
    document_class: type,
    collection_name: Optional[str] = None,
    client_name: Optional[str] = None,
    database_name: Optional[str] = None,
    to_document: Optional[ToDocument] = None,
    to_model: Optional[ToModel] = None,
) -> DocumentMetadata:
    """
    Bind a class to a collection, overwriting any previous binding.

    Args:
        document_class: Class to map
        collection_name: Collection the documents are stored in
        client_name: Registered client to use (registry default when None)
        database_name: Database override (client default when None)
        to_document: Optional custom instance -> document hook
        to_model: Optional custom document -> instance hook

    Returns:
        The stored metadata
    """
    meta = _document_metadata.get(document_class)
    if meta is None:
        meta = DocumentMetadata()
        _document_metadata[document_class] = meta

    meta.collection_name = collection_name
    meta.client_name = client_name
    meta.database_name = database_name
    meta.to_document = to_document
    meta.to_model = to_model

    logger.debug(
        "Mapped document %s to collection %r", document_class.__qualname__, collection_name
    )
    return meta


def has_document_metadata(document_class: Any) -> bool:
    """Whether the exact class was declared as a document."""
    try:
        return document_class in _document_metadata
    except TypeError:
        # unhashable values are never mapped classes
        return False


def get_document_metadata(document_class: type) -> DocumentMetadata:
    """Return the document metadata or raise ``NotMappedError``."""
    meta = _document_metadata.get(document_class)
    if meta is None:
        name = getattr(document_class, "__name__", repr(document_class))
        raise NotMappedError(f'Document metadata does not exist for class "{name}".')
    return meta


def assert_valid_document(document_class: type) -> None:
    """Raise ``ConfigurationError`` when the class has no collection bound."""
    meta = get_document_metadata(document_class)
    if not meta.collection_name:
        raise ConfigurationError(
            f'Document missing "collection_name" for class "{document_class.__name__}".'
        )


# ==================== Embedded documents ====================

def define_embedded_document(embedded_class: type) -> EmbeddedDocumentMetadata:
    """Mark a class as embeddable. Idempotent."""
    meta = _embedded_document_metadata.get(embedded_class)
    if meta is None:
        meta = EmbeddedDocumentMetadata()
        _embedded_document_metadata[embedded_class] = meta
        logger.debug("Mapped embedded document %s", embedded_class.__qualname__)
    return meta


def has_embedded_document_metadata(embedded_class: Any) -> bool:
    """Whether the exact class was declared as an embedded document."""
    try:
        return embedded_class in _embedded_document_metadata
    except TypeError:
        return False


# ==================== Fields ====================

def define_field(target: type, name: str) -> FieldMetadata:
    """Register a field copied verbatim between class and document."""
    return _store_field(target, FieldMetadata(name=name, type=FieldType.FIELD))


def define_embed_one_field(
    target: type, name: str, create_embed_type: CreateEmbedType
) -> FieldMetadata:
    """Register a field holding a single embedded document."""
    return _define_embed_field(target, name, create_embed_type, FieldType.EMBED_ONE)


def define_embed_many_field(
    target: type,
    name: str,
    create_embed_type: CreateEmbedType,
    as_: Union[EmbedManyAs, str] = EmbedManyAs.ARRAY,
) -> FieldMetadata:
    """
    Register a field holding many embedded documents.

    Args:
        target: Class owning the field
        name: Field name
        create_embed_type: Resolver returning the embedded class (or instance)
            for a raw value
        as_: Container representation - array, map or object

    Raises:
        InvalidArgumentError: For an unknown representation
    """
    field_type = embed_many_field_type(as_)
    return _define_embed_field(target, name, create_embed_type, field_type)


def embed_many_field_type(as_: Union[EmbedManyAs, str]) -> FieldType:
    """Field type for an embed-many representation, ``InvalidArgumentError`` if unknown."""
    try:
        representation = EmbedManyAs(as_)
    except ValueError as exc:
        raise InvalidArgumentError(f'Invalid embed as type. "{as_}" given.') from exc
    return _EMBED_MANY_FIELD_TYPES[representation]


def get_field_metadata(target: Any, name: str) -> Optional[FieldMetadata]:
    """
    Look up field metadata for a class (or an instance's class).

    Fields declared on base classes are inherited.
    """
    cls = target if isinstance(target, type) else type(target)
    for klass in cls.__mro__:
        fields = _field_metadata.get(klass)
        if fields and name in fields:
            return fields[name]
    return None


def _define_embed_field(
    target: type, name: str, create_embed_type: CreateEmbedType, field_type: FieldType
) -> FieldMetadata:
    if not callable(create_embed_type):
        raise InvalidArgumentError(f'Embed type resolver for "{name}" must be callable.')

    def resolve_embed(value: Any) -> Any:
        # imported lazily, the classifier depends on this module
        from mongo_mapper.core.classifier import resolve_embedded_instance

        return resolve_embedded_instance(create_embed_type(value))

    meta = FieldMetadata(name=name, type=field_type, create_embed_type=resolve_embed)
    return _store_field(target, meta)


def _store_field(target: type, meta: FieldMetadata) -> FieldMetadata:
    _field_metadata.setdefault(target, {})[meta.name] = meta
    logger.debug(
        "Registered %s field %s.%s", meta.type.value, target.__qualname__, meta.name
    )
    return meta

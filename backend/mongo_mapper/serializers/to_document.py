"""
Class -> document serializer.
"""
from typing import Any

from mongo_mapper.core.classifier import is_document
from mongo_mapper.core.exceptions import (
    InvalidReferenceError,
    NotADocumentError,
    TypeMismatchError,
)
from mongo_mapper.metadata.registry import get_field_metadata
from mongo_mapper.models.metadata import FieldType
from mongo_mapper.serializers.utils import (
    each_in_map_or_object,
    is_keyed,
    is_sequence,
    own_fields,
)


def to_document(obj: Any) -> dict:
    """
    Convert a document instance into a plain dict ready for MongoDB.

    Only declared fields that are set on the instance are written. The
    instance is not modified.

    Raises:
        NotADocumentError: ``obj`` is not an instance of a declared document
        InvalidReferenceError: a field holds another document instance
        TypeMismatchError: an embed-many field holds the wrong container
    """
    if not is_document(obj):
        raise NotADocumentError(
            'Objects passed to "to_document" must be instances of declared documents.'
        )
    return _process(obj)


def _process(obj: Any) -> dict:
    try:
        fields = own_fields(obj)
    except TypeError as exc:
        raise TypeMismatchError(
            f'Expecting an embedded document instance. Got "{type(obj).__name__}".'
        ) from exc

    doc: dict = {}
    for key, value in fields.items():
        if is_document(value):
            raise InvalidReferenceError(
                "Unable to map fields to other documents. "
                "Use ObjectIds to reference another document."
            )

        meta = get_field_metadata(type(obj), key)
        if meta is None:
            continue

        if meta.type is FieldType.FIELD:
            doc[key] = value
        elif meta.type is FieldType.EMBED_ONE:
            doc[key] = None if value is None else _process_embedded(value)
        elif meta.type is FieldType.EMBED_ARRAY:
            if not is_sequence(value):
                raise TypeMismatchError(
                    f'Expecting list for "{key}". Got "{type(value).__name__}".'
                )
            doc[key] = [_process_embedded(item) for item in value]
        elif meta.type in (FieldType.EMBED_MAP, FieldType.EMBED_OBJECT):
            if not is_keyed(value):
                raise TypeMismatchError(
                    f'Expecting mapping or object for "{key}". Got "{type(value).__name__}".'
                )
            doc[key] = each_in_map_or_object(value, lambda _, item: _process_embedded(item))

    return doc


def _process_embedded(value: Any) -> dict:
    if is_document(value):
        raise InvalidReferenceError(
            "Unable to embed another document. Use ObjectIds to reference another document."
        )
    return _process(value)

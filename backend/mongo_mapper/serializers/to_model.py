"""
Document -> class deserializer.
"""
from collections import OrderedDict
from typing import Any, Type, TypeVar, Union

from mongo_mapper.core.classifier import is_constructible
from mongo_mapper.core.exceptions import NotMappedError
from mongo_mapper.metadata.registry import get_field_metadata, has_document_metadata
from mongo_mapper.models.metadata import FieldMetadata, FieldType
from mongo_mapper.serializers.utils import each_in_map_or_object

T = TypeVar("T")


def to_model(class_or_instance: Union[Type[T], T], doc: dict) -> T:
    """
    Hydrate a document instance from a plain MongoDB document.

    Passing a class builds a new instance; passing an instance hydrates it in
    place. Keys without declared field metadata are ignored and fields
    missing from ``doc`` are left untouched.

    Raises:
        NotMappedError: the target class is not a declared document
    """
    if is_constructible(class_or_instance):
        obj = class_or_instance()
    else:
        obj = class_or_instance

    if not has_document_metadata(type(obj)):
        raise NotMappedError(
            f'Unable to map mongo document to "{type(obj).__name__}", it is not a declared document.'
        )

    return _process(obj, doc)


def _process(obj: Any, doc: Any) -> Any:
    for key, value in doc.items():
        meta = get_field_metadata(type(obj), key)
        if meta is None:
            continue

        if meta.type is FieldType.FIELD:
            setattr(obj, key, value)
        elif meta.type is FieldType.EMBED_ONE:
            setattr(obj, key, None if value is None else _embed(meta, value))
        elif meta.type is FieldType.EMBED_ARRAY:
            setattr(obj, key, [_embed(meta, item) for item in value])
        elif meta.type is FieldType.EMBED_OBJECT:
            setattr(obj, key, dict(each_in_map_or_object(value, lambda _, item: _embed(meta, item))))
        elif meta.type is FieldType.EMBED_MAP:
            setattr(obj, key, OrderedDict(each_in_map_or_object(value, lambda _, item: _embed(meta, item))))

    return obj


def _embed(meta: FieldMetadata, value: Any) -> Any:
    return _process(meta.create_embed_type(value), value)

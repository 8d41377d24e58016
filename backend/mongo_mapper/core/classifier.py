"""
Runtime classification of values met while walking object graphs.
"""
import inspect
from typing import Any

from mongo_mapper.core.exceptions import NotMappedError
from mongo_mapper.metadata.registry import (
    has_document_metadata,
    has_embedded_document_metadata,
)


def is_constructible(value: Any) -> bool:
    """True for a class that can be called to build a new instance."""
    return inspect.isclass(value)


def is_document(value: Any) -> bool:
    """True when ``value`` is an instance of a class declared as a document."""
    if value is None or is_constructible(value):
        return False
    return has_document_metadata(type(value))


def is_embedded_document(value: Any) -> bool:
    """True when ``value`` is an instance of a class declared as embeddable."""
    if value is None or is_constructible(value):
        return False
    return has_embedded_document_metadata(type(value))


def resolve_embedded_instance(class_or_instance: Any) -> Any:
    """
    Turn an embed resolver result into the instance to hydrate.

    Resolvers may return the embedded class, which is constructed here, or an
    instance they already built, which is used as-is.

    Raises:
        NotMappedError: When the class was not declared as embeddable
    """
    if is_constructible(class_or_instance):
        if not has_embedded_document_metadata(class_or_instance):
            raise _not_embeddable(class_or_instance)
        return class_or_instance()

    if not is_embedded_document(class_or_instance):
        raise _not_embeddable(type(class_or_instance))
    return class_or_instance


def _not_embeddable(embedded_class: type) -> NotMappedError:
    return NotMappedError(f'Class "{embedded_class.__name__}" is not a mapped embedded document.')

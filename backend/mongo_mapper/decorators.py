"""
Declarative surface for mapped classes.

Usage:
    @embedded_document
    class Address:
        street = Field()
        city = Field()

    @document(collection_name="users")
    class User:
        _id = Field()
        email = Field()
        address = EmbedOne(lambda doc: Address)
        addresses = EmbedMany(lambda doc: Address, as_=EmbedManyAs.MAP)

Field markers register themselves when the owning class is created. They are
non-data descriptors: an instance attribute that was never assigned reads as
the marker's default and is not part of the instance's own fields, so it is
left out of serialized documents. A non-None default is copied onto the
instance the first time it is read, so each instance owns (and serializes)
its own copy.
"""
import copy
from typing import Any, Optional, Union

from mongo_mapper.metadata.registry import (
    define_document,
    define_embed_many_field,
    define_embed_one_field,
    define_embedded_document,
    define_field,
    embed_many_field_type,
)
from mongo_mapper.models.metadata import CreateEmbedType, EmbedManyAs, ToDocument, ToModel


def document(
    collection_name: Optional[str] = None,
    client_name: Optional[str] = None,
    database_name: Optional[str] = None,
    to_document: Optional[ToDocument] = None,
    to_model: Optional[ToModel] = None,
) -> Any:
    """
    Class decorator declaring a document bound to a collection.

    Used bare (``@document``) the class is declared without a collection
    and cannot back a repository until it is declared again with one.

    Args:
        collection_name: Collection the documents are stored in
        client_name: Registered client name, "default" when omitted
        database_name: Overrides the client's default database
        to_document: Custom instance -> document hook used by repositories
        to_model: Custom document -> instance hook used by repositories
    """
    def decorator(cls: type) -> type:
        define_document(
            cls,
            collection_name=collection_name,
            client_name=client_name,
            database_name=database_name,
            to_document=to_document,
            to_model=to_model,
        )
        return cls

    if isinstance(collection_name, type):
        cls, collection_name = collection_name, None
        return decorator(cls)
    return decorator


def embedded_document(cls: Optional[type] = None) -> Any:
    """Class decorator declaring an embeddable class. Usable with or without parentheses."""
    def decorator(target: type) -> type:
        define_embedded_document(target)
        return target

    if cls is not None:
        return decorator(cls)
    return decorator


class _FieldMarker:
    """Base descriptor for declared fields."""

    def __init__(self, default: Any = None):
        self.default = default
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.register(owner, name)

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        if self.default is None:
            return None
        value = copy.deepcopy(self.default)
        instance.__dict__[self.name] = value
        return value

    def register(self, owner: type, name: str) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Field(_FieldMarker):
    """A value copied verbatim between instance and document."""

    def register(self, owner: type, name: str) -> None:
        define_field(owner, name)


class EmbedOne(_FieldMarker):
    """A single embedded document."""

    def __init__(self, resolver: CreateEmbedType, default: Any = None):
        super().__init__(default)
        self.resolver = resolver

    def register(self, owner: type, name: str) -> None:
        define_embed_one_field(owner, name, self.resolver)


class EmbedMany(_FieldMarker):
    """Many embedded documents held in a list, an ordered map or a plain dict."""

    def __init__(
        self,
        resolver: CreateEmbedType,
        as_: Union[EmbedManyAs, str] = EmbedManyAs.ARRAY,
        default: Any = None,
    ):
        super().__init__(default)
        # validated here, errors raised from __set_name__ get wrapped on older interpreters
        embed_many_field_type(as_)
        self.resolver = resolver
        self.as_ = as_

    def register(self, owner: type, name: str) -> None:
        define_embed_many_field(owner, name, self.resolver, self.as_)

"""
Repository wrapping a MongoDB collection with class <-> document mapping.
"""
import logging
from typing import Any, Generic, Optional, Type, TypeVar, Union

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.results import DeleteResult

from mongo_mapper.core.exceptions import InvalidIdentifierError
from mongo_mapper.database.registry import ClientManager
from mongo_mapper.metadata.registry import assert_valid_document, get_document_metadata
from mongo_mapper.serializers import to_document, to_model
from mongo_mapper.services.cursor import DocumentCursor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Repository(Generic[T]):
    """CRUD operations for a single document class."""

    def __init__(self, document_class: Type[T], source: Any):
        """
        Bind the repository to a document class.

        Args:
            document_class: Class declared with ``@document``
            source: A ClientManager resolving the bound collection, or a raw
                collection handle used as-is

        Raises:
            NotMappedError: The class is not a declared document
            ConfigurationError: The class has no collection name
        """
        assert_valid_document(document_class)

        self.document_class = document_class
        self.meta = get_document_metadata(document_class)

        if isinstance(source, ClientManager):
            self.collection = source.get_collection(
                self.meta.collection_name,
                client_name=self.meta.client_name,
                database_name=self.meta.database_name,
            )
        else:
            self.collection = source

    # ==================== Mapping ====================

    def get_collection(self) -> Any:
        """Return the raw collection handle."""
        return self.collection

    def to_model(self, doc: Optional[dict], into: Optional[T] = None) -> Optional[T]:
        """
        Map a raw document to an instance.

        When ``into`` is given the document is hydrated into that existing
        instance instead of a new one.
        """
        if not doc:
            return None
        if into is None and self.meta.to_model is not None:
            return self.meta.to_model(doc)
        return to_model(into if into is not None else self.document_class, doc)

    def to_document(self, obj: T) -> dict:
        """Map an instance to a plain document."""
        if self.meta.to_document is not None:
            return self.meta.to_document(obj)
        return to_document(obj)

    # ==================== Queries ====================

    async def count(self, filter: Optional[dict] = None, **kwargs: Any) -> int:
        """Number of documents matching the filter."""
        return await self.collection.count_documents(filter or {}, **kwargs)

    def find(self, filter: Optional[dict] = None, *args: Any, **kwargs: Any) -> DocumentCursor[T]:
        """Cursor over the matching documents, hydrated while iterating."""
        return DocumentCursor(self.collection.find(filter, *args, **kwargs), self.to_model)

    async def find_one(self, filter: Optional[dict] = None, *args: Any, **kwargs: Any) -> Optional[T]:
        """First matching document as an instance, or None."""
        return self.to_model(await self.collection.find_one(filter, *args, **kwargs))

    async def find_one_by_id(self, id: Union[ObjectId, str]) -> Optional[T]:
        """Find by ObjectId or its hex string. Invalid ids return None."""
        try:
            filter = self._filter_by_id(id)
        except InvalidIdentifierError:
            return None
        return await self.find_one(filter)

    # ==================== Writes ====================

    async def delete_many(self, filter: dict, **kwargs: Any) -> DeleteResult:
        return await self.collection.delete_many(filter, **kwargs)

    async def delete_one(self, filter: dict, **kwargs: Any) -> DeleteResult:
        return await self.collection.delete_one(filter, **kwargs)

    async def delete_one_by_id(self, id: Union[ObjectId, str], **kwargs: Any) -> Optional[DeleteResult]:
        """Delete by ObjectId or its hex string. Invalid ids return None."""
        try:
            filter = self._filter_by_id(id)
        except InvalidIdentifierError:
            return None
        return await self.collection.delete_one(filter, **kwargs)

    async def save(self, obj: T, **kwargs: Any) -> Optional[T]:
        """
        Insert or update the instance by its ``_id``.

        A new ObjectId is assigned when the instance has none. Fields are
        written with ``$set``, so keys already stored but not set on the
        instance are kept.

        Returns:
            The same instance, or None when the write was not acknowledged
        """
        if not getattr(obj, "_id", None):
            obj._id = ObjectId()

        result = await self.collection.update_one(
            {"_id": obj._id},
            {"$set": self.to_document(obj)},
            **{**kwargs, "upsert": True},
        )
        logger.debug(
            "Saved %s %s (upserted=%s)",
            self.document_class.__name__,
            obj._id,
            result.upserted_id is not None,
        )
        return obj if result.acknowledged else None

    async def create(self, plain: dict, **kwargs: Any) -> Optional[T]:
        """Build an instance from a plain dict and save it."""
        return await self.save(self.to_model(plain) or self.document_class(), **kwargs)

    async def find_one_and_update(self, filter: dict, update: dict, **kwargs: Any) -> Optional[T]:
        """
        Apply ``update`` to the first match and return the updated instance.

        Pass ``upsert=True`` to create the document when nothing matches.
        Returns None when no document matched and none was created.
        """
        doc = await self.collection.find_one_and_update(
            filter,
            update,
            **{**kwargs, "return_document": ReturnDocument.AFTER},
        )
        return self.to_model(doc)

    async def find_one_and_update_by_id(
        self, id: Union[ObjectId, str], update: dict, **kwargs: Any
    ) -> Optional[T]:
        """``find_one_and_update`` by ObjectId or its hex string. Invalid ids return None."""
        try:
            filter = self._filter_by_id(id)
        except InvalidIdentifierError:
            return None
        return await self.find_one_and_update(filter, update, **kwargs)

    # ==================== Helper Methods ====================

    def _filter_by_id(self, id: Union[ObjectId, str]) -> dict:
        if isinstance(id, ObjectId):
            return {"_id": id}
        if isinstance(id, str) and ObjectId.is_valid(id):
            return {"_id": ObjectId(id)}
        logger.debug("Invalid ObjectId %r for %s", id, self.document_class.__name__)
        raise InvalidIdentifierError(f"Invalid ObjectId given: {id!r}.")

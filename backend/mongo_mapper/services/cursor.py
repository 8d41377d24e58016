"""
Cursor wrapper hydrating documents while iterating.
"""
from typing import Any, AsyncIterator, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class DocumentCursor(Generic[T]):
    """
    Wraps a driver cursor and maps each raw document through ``transform``.

    Query modifiers are forwarded to the driver cursor and return this
    wrapper so they can be chained:

        users = await repository.find({"active": True}).sort("email", 1).to_list()
    """

    def __init__(self, cursor: Any, transform: Callable[[dict], T]):
        self._cursor = cursor
        self._transform = transform

    def sort(self, *args: Any, **kwargs: Any) -> "DocumentCursor[T]":
        self._cursor = self._cursor.sort(*args, **kwargs)
        return self

    def skip(self, skip: int) -> "DocumentCursor[T]":
        self._cursor = self._cursor.skip(skip)
        return self

    def limit(self, limit: int) -> "DocumentCursor[T]":
        self._cursor = self._cursor.limit(limit)
        return self

    async def to_list(self, length: Optional[int] = None) -> list[T]:
        """Exhaust the cursor (up to ``length`` documents) and hydrate every document."""
        docs = await self._cursor.to_list(length=length)
        return [self._transform(doc) for doc in docs]

    def __aiter__(self) -> AsyncIterator[T]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[T]:
        async for doc in self._cursor:
            yield self._transform(doc)

"""
Repository contract shared by every storage backend.

The in-memory engine implements it directly; a persistent backend implements
the same operations against its own storage. Every operation except `create`
is a coroutine so that I/O-bound backends fit behind the same interface.
"""

from __future__ import annotations

import abc
from typing import Any, Generic, Mapping, Protocol, Union, runtime_checkable

from record_store.domain.models import ModelT, SearchInput, SearchOutput

SearchParams = Union[SearchInput, Mapping[str, Any], None]


@runtime_checkable
class Repository(Protocol[ModelT]):
    """
    Operation set every record repository must implement.

    `get_by_id`, `update` and `delete` raise `NotFoundError` when no record
    carries the requested id. `get` never raises.
    """

    def create(self, props: Mapping[str, Any]) -> ModelT:
        """Build a record with a fresh id and timestamps without storing it."""
        ...

    async def insert(self, record: ModelT) -> ModelT:
        """Append `record` to the collection."""
        ...

    async def get(self, params: SearchParams = None) -> SearchOutput[ModelT]:
        """Run filter, sort and paginate and return one page."""
        ...

    async def get_by_id(self, record_id: str) -> ModelT:
        ...

    async def update(self, record: ModelT) -> ModelT:
        """Replace the stored record with the same id, keeping its position."""
        ...

    async def delete(self, record_id: str) -> ModelT:
        """Remove the record and return it."""
        ...


class AbstractRepository(abc.ABC, Generic[ModelT]):
    """
    ABC helper for class-based backends.

    Subclasses implement every operation of `Repository`.
    """

    @abc.abstractmethod
    def create(self, props: Mapping[str, Any]) -> ModelT:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    async def insert(self, record: ModelT) -> ModelT:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    async def get(
        self, params: SearchParams = None
    ) -> SearchOutput[ModelT]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    async def get_by_id(self, record_id: str) -> ModelT:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    async def update(self, record: ModelT) -> ModelT:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    async def delete(self, record_id: str) -> ModelT:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = ["Repository", "AbstractRepository", "SearchParams"]

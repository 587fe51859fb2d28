"""
Generic in-memory record engine.

Holds an ordered list of records and implements the repository contract on top
of it. Entity repositories customise it by injecting a filter predicate, the
sortable-field mapping and, optionally, a default ordering.

Every operation runs under one re-entrant lock, so a locate-then-write such as
`update` or `delete` is atomic with respect to other threads. Use `atomic()`
to extend that guarantee to a caller-side sequence (check then insert). Never
await foreign I/O inside `atomic()`: the lock is owned by the thread, not the
task.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Dict, Generator, Iterable, List, Mapping, Optional, Tuple, Type

from record_store.domain.errors import NotFoundError
from record_store.domain.models import SORT_DESC, ModelT, SearchInput, SearchOutput, new_id, utcnow
from record_store.repositories.abstract import AbstractRepository, SearchParams
from record_store.repositories.pipeline import (
    FilterPredicate,
    SortableFields,
    apply_filter,
    apply_paginate,
    apply_sort,
)
from record_store.utils.logging import get_logger

log = get_logger(__name__)


class InMemoryRepository(AbstractRepository[ModelT]):
    """
    Repository over a list owned exclusively by this instance.

    Parameters
    ----------
    model_cls : type
        Record subclass built by `create`.
    filter_predicate : callable
        `(record, filter) -> bool`, consulted only when a filter is given.
    sortable_fields : mapping, optional
        Field name to accessor. Sort requests for other names are ignored.
    default_sort, default_sort_dir : str, optional
        Ordering applied when the caller does not name a sort field.
    items : iterable, optional
        Initial records, kept in the given order.
    """

    def __init__(
        self,
        model_cls: Type[ModelT],
        filter_predicate: FilterPredicate,
        sortable_fields: Optional[SortableFields] = None,
        *,
        default_sort: Optional[str] = None,
        default_sort_dir: Optional[str] = None,
        items: Optional[Iterable[ModelT]] = None,
    ) -> None:
        self.model_cls = model_cls
        self.filter_predicate = filter_predicate
        self.sortable_fields: Dict[str, Any] = dict(sortable_fields or {})
        self.default_sort = default_sort
        self.default_sort_dir = default_sort_dir
        self._items: List[ModelT] = list(items or [])
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def snapshot(self) -> Tuple[ModelT, ...]:
        """Immutable copy of the collection in stored order."""
        with self._lock:
            return tuple(self._items)

    @contextmanager
    def atomic(self) -> Generator["InMemoryRepository[ModelT]", None, None]:
        """Hold the collection lock across several operations."""
        with self._lock:
            yield self

    def create(self, props: Mapping[str, Any]) -> ModelT:
        now = utcnow()
        values: Dict[str, Any] = {"id": new_id(), "created_at": now, "updated_at": now}
        values.update(props)
        return self.model_cls.model_validate(values)

    async def insert(self, record: ModelT) -> ModelT:
        with self._lock:
            self._items.append(record)
        log.debug("Record inserted", extra={"record_id": record.id})
        return record

    async def get(self, params: SearchParams = None) -> SearchOutput[ModelT]:
        if isinstance(params, SearchInput):
            search = params
        else:
            search = SearchInput.model_validate(dict(params or {}))
        sort, sort_dir = self._effective_order(search.sort, search.sort_dir)

        with self._lock:
            filtered = apply_filter(self._items, search.filter, self.filter_predicate)
            ordered = apply_sort(filtered, sort, sort_dir, self.sortable_fields)
            page = apply_paginate(ordered, search.page, search.per_page)
            total = len(filtered)

        return SearchOutput[self.model_cls](
            data=page,
            total=total,
            current_page=search.page,
            per_page=search.per_page,
            sort=sort,
            sort_dir=sort_dir,
            filter=search.filter,
        )

    async def get_by_id(self, record_id: str) -> ModelT:
        with self._lock:
            return self._items[self._index_of(record_id)]

    async def update(self, record: ModelT) -> ModelT:
        with self._lock:
            index = self._index_of(record.id)
            self._items[index] = record
        log.debug("Record updated", extra={"record_id": record.id, "index": index})
        return record

    async def delete(self, record_id: str) -> ModelT:
        with self._lock:
            record = self._items.pop(self._index_of(record_id))
        log.debug("Record deleted", extra={"record_id": record_id})
        return record

    def _effective_order(
        self, sort: Optional[str], sort_dir: Optional[str]
    ) -> Tuple[Optional[str], Optional[str]]:
        if sort is None:
            sort = self.default_sort
        if sort_dir is None:
            sort_dir = self.default_sort_dir
        if sort is not None and sort_dir is None:
            sort_dir = SORT_DESC
        return sort, sort_dir

    def _index_of(self, record_id: str) -> int:
        # Caller holds the lock.
        for index, item in enumerate(self._items):
            if item.id == record_id:
                return index
        log.debug("Record not found", extra={"record_id": record_id})
        raise NotFoundError(f"Model not found using ID {record_id}")


__all__ = ["InMemoryRepository"]

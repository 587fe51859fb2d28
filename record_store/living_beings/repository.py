"""
Living being repositories.

`LivingBeingsRepository` extends the generic contract with name lookups.
`LivingBeingInMemoryRepository` specialises the generic engine:

- filter: case-insensitive substring match on `name`;
- sortable fields: `name`, `created_at`;
- default ordering: `created_at` descending (newest first) when the caller
  names no sort field. The effective ordering is echoed in `SearchOutput`.

Names are unique by convention. `insert_unique` runs the conflict check and
the insert as one locked unit; calling `conflicting_name` then `insert`
separately is not atomic.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable

from record_store.domain.errors import ConflictError, NotFoundError
from record_store.domain.models import SORT_DESC
from record_store.living_beings.models import LivingBeing
from record_store.repositories.abstract import Repository
from record_store.repositories.in_memory import InMemoryRepository
from record_store.repositories.pipeline import field_contains, sortable
from record_store.utils.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class LivingBeingsRepository(Repository[LivingBeing], Protocol):
    async def get_by_name(self, name: str) -> LivingBeing:
        """Return the living being with exactly this name or raise `NotFoundError`."""
        ...

    async def conflicting_name(self, name: str) -> None:
        """Raise `ConflictError` if the name is already taken."""
        ...


class LivingBeingInMemoryRepository(InMemoryRepository[LivingBeing]):
    def __init__(self, items: Optional[Iterable[LivingBeing]] = None) -> None:
        super().__init__(
            LivingBeing,
            filter_predicate=field_contains("name"),
            sortable_fields=sortable("name", "created_at"),
            default_sort="created_at",
            default_sort_dir=SORT_DESC,
            items=items,
        )

    async def get_by_name(self, name: str) -> LivingBeing:
        being = self._find_by_name(name)
        if being is None:
            raise NotFoundError(f"Living being not found using name {name}")
        return being

    async def conflicting_name(self, name: str) -> None:
        self._ensure_name_free(name)

    async def insert_unique(self, being: LivingBeing) -> LivingBeing:
        """Insert `being` unless its name is taken, atomically."""
        with self._lock:
            self._ensure_name_free(being.name)
            self._items.append(being)
        log.debug("Record inserted", extra={"record_id": being.id})
        return being

    def _ensure_name_free(self, name: str) -> None:
        if self._find_by_name(name) is not None:
            log.info("Living being name already taken", extra={"living_being": name})
            raise ConflictError(f"There is already a living being with the name {name}")

    def _find_by_name(self, name: str) -> Optional[LivingBeing]:
        with self._lock:
            return next((item for item in self._items if item.name == name), None)


__all__ = ["LivingBeingsRepository", "LivingBeingInMemoryRepository"]

"""
Repositories package for the record store.

Re-exports the repository contract, the query pipeline helpers and the
generic in-memory engine so downstream code can import from
`record_store.repositories` directly.
"""

from record_store.repositories.abstract import AbstractRepository, Repository, SearchParams
from record_store.repositories.in_memory import InMemoryRepository
from record_store.repositories.pipeline import (
    FilterPredicate,
    SortableFields,
    apply_filter,
    apply_paginate,
    apply_sort,
    field_contains,
    sortable,
)

__all__ = [
    # Contract
    "AbstractRepository",
    "Repository",
    "SearchParams",
    # Engine
    "InMemoryRepository",
    # Pipeline
    "FilterPredicate",
    "SortableFields",
    "apply_filter",
    "apply_paginate",
    "apply_sort",
    "field_contains",
    "sortable",
]

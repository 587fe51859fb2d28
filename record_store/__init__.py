"""
Record Store - generic in-memory repository with a filter/sort/paginate search.

The package provides:

- A repository contract shared by in-memory and persistent backends
- A generic in-memory engine with a pluggable filter predicate, a whitelist of
  sortable fields and an optional default ordering
- A typed error taxonomy (not found, conflict)
- The living beings catalogue as a concrete specialisation
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from record_store.config import Settings, get_settings
from record_store.domain import (
    ConflictError,
    NotFoundError,
    Record,
    RepositoryError,
    SearchInput,
    SearchOutput,
)
from record_store.living_beings import (
    LivingBeing,
    LivingBeingInMemoryRepository,
    LivingBeingsRepository,
)
from record_store.repositories import (
    AbstractRepository,
    InMemoryRepository,
    Repository,
    field_contains,
    sortable,
)
from record_store.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "SearchInput",
    "SearchOutput",
    "RepositoryError",
    "NotFoundError",
    "ConflictError",
    # Repositories
    "AbstractRepository",
    "InMemoryRepository",
    "Repository",
    "field_contains",
    "sortable",
    # Living beings
    "LivingBeing",
    "LivingBeingInMemoryRepository",
    "LivingBeingsRepository",
    # Logging
    "configure_logging",
    "get_logger",
]

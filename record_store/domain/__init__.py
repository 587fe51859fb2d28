"""
Domain package for the record store.

Exports the record/search models and the error taxonomy shared by every
repository backend. Keep this package free of storage logic.
"""

from record_store.domain.errors import ConflictError, NotFoundError, RepositoryError
from record_store.domain.models import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    Record,
    SearchInput,
    SearchOutput,
)

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "Record",
    "SearchInput",
    "SearchOutput",
    "RepositoryError",
    "NotFoundError",
    "ConflictError",
]

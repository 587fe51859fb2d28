"""
Error taxonomy shared by every repository backend.

Only two conditions are errors: a record that cannot be found by its key and a
domain-declared uniqueness conflict. Malformed query parameters are never
errors; they are defaulted by `SearchInput`.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for repository errors."""


class NotFoundError(RepositoryError):
    """Raised when no record matches the requested key."""


class ConflictError(RepositoryError):
    """Raised by entity-specific uniqueness checks before an insert."""


__all__ = ["RepositoryError", "NotFoundError", "ConflictError"]

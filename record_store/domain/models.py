"""
Domain models for the record store.

`Record` is the base payload every collection holds: an opaque string id and
creation/update timestamps, with entity fields declared by subclasses.
`SearchInput` and `SearchOutput` describe the request/response of the search
pipeline. `SearchInput` never rejects a value: anything out of range falls back
to its default so a search always produces a page.
"""
from __future__ import annotations

import math
import uuid
from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, ValidationInfo, field_validator

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15
SORT_ASC = "asc"
SORT_DESC = "desc"


def new_id() -> str:
    """Return a fresh UUID4 identifier as a string."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Record(BaseModel):
    """
    A uniquely identified, timestamped item stored in a collection.

    Records are immutable; produce a new version with `model_copy(update=...)`
    and hand it to the repository's `update`.
    """

    id: str = Field(default_factory=new_id, description="Opaque unique identifier.")
    created_at: datetime = Field(default_factory=utcnow, description="Creation timestamp.")
    updated_at: datetime = Field(default_factory=utcnow, description="Last update timestamp.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def touched(self) -> "Record":
        """Return a copy with `updated_at` set to now."""
        return self.model_copy(update={"updated_at": utcnow()})

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # Naive timestamps are taken to be UTC so every record compares.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


ModelT = TypeVar("ModelT", bound=Record)


class SearchInput(BaseModel):
    """
    Search request for a repository's `get`.

    Invalid values are replaced rather than rejected:
    - `page` / `per_page` that are missing, non-integer or below 1 use their defaults.
    - An empty `sort` or `filter` string is treated as absent.
    - A `sort_dir` other than "asc" becomes "desc".
    """

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    sort: Optional[str] = None
    sort_dir: Optional[str] = None
    filter: Optional[str] = None

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("page", "per_page", mode="before")
    @classmethod
    def _positive_int_or_default(cls, value: Any, info: ValidationInfo) -> int:
        default = cls.model_fields[info.field_name].default
        if value is None or isinstance(value, bool):
            return default
        try:
            number = int(value)
        except (TypeError, ValueError, OverflowError):
            return default
        return number if number >= 1 else default

    @field_validator("sort", "filter", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value)
        return value or None

    @field_validator("sort_dir", mode="before")
    @classmethod
    def _normalize_sort_dir(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return SORT_ASC if value == SORT_ASC else SORT_DESC


class SearchOutput(BaseModel, Generic[ModelT]):
    """
    One page of search results.

    `total` counts the records that matched the filter stage, before
    pagination. The remaining fields echo the effective search input.
    """

    data: List[ModelT]
    total: int
    current_page: int
    per_page: int
    sort: Optional[str] = None
    sort_dir: Optional[str] = None
    filter: Optional[str] = None

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))


__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "SORT_ASC",
    "SORT_DESC",
    "ModelT",
    "Record",
    "SearchInput",
    "SearchOutput",
    "new_id",
    "utcnow",
]

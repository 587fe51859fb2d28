"""
Query pipeline stages for in-memory searches.

Three pure functions composed in a fixed order by the engine's `get`:

    filtered = apply_filter(items, filter, predicate)
    ordered = apply_sort(filtered, sort, sort_dir, sortable_fields)
    page = apply_paginate(ordered, page, per_page)

None of the stages mutate their input. `apply_filter` and `apply_sort` return
the input sequence itself when they have nothing to do.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from record_store.domain.models import SORT_ASC, ModelT

FilterPredicate = Callable[[Any, str], bool]
SortableFields = Mapping[str, Callable[[Any], Any]]


def sortable(*names: str) -> Dict[str, Callable[[Any], Any]]:
    """Build a sortable-field mapping that reads each named attribute."""
    return {name: attrgetter(name) for name in names}


def field_contains(field: str) -> FilterPredicate:
    """
    Predicate matching records whose text `field` contains the filter,
    ignoring case.
    """
    getter = attrgetter(field)

    def predicate(item: Any, value: str) -> bool:
        field_value = getter(item)
        if field_value is None:
            return False
        return value.lower() in str(field_value).lower()

    return predicate


def apply_filter(
    items: Sequence[ModelT], filter: Optional[str], predicate: FilterPredicate
) -> Sequence[ModelT]:
    if filter is None:
        return items
    return [item for item in items if predicate(item, filter)]


def _natural_key(value: Any) -> Tuple[bool, Any]:
    # None orders before any value
    return (value is not None, value)


def apply_sort(
    items: Sequence[ModelT],
    sort: Optional[str],
    sort_dir: Optional[str],
    sortable_fields: SortableFields,
) -> Sequence[ModelT]:
    """
    Order `items` by a whitelisted field.

    Unknown or absent `sort` leaves the input untouched. Any `sort_dir` other
    than "asc" sorts descending. Ties keep their input order.
    """
    if sort is None or sort not in sortable_fields:
        return items
    accessor = sortable_fields[sort]
    return sorted(
        items,
        key=lambda item: _natural_key(accessor(item)),
        reverse=sort_dir != SORT_ASC,
    )


def apply_paginate(items: Sequence[ModelT], page: int, per_page: int) -> List[ModelT]:
    """Return the 1-indexed `page` window of `items`, empty past the end."""
    start = (page - 1) * per_page
    return list(items[start : start + per_page])


__all__ = [
    "FilterPredicate",
    "SortableFields",
    "apply_filter",
    "apply_paginate",
    "apply_sort",
    "field_contains",
    "sortable",
]

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pydantic
import pytest

from record_store.domain.models import Record, SearchInput, SearchOutput

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15


def test_search_input_defaults():
    search = SearchInput()

    assert search.page == DEFAULT_PAGE
    assert search.per_page == DEFAULT_PER_PAGE
    assert search.sort is None
    assert search.sort_dir is None
    assert search.filter is None


@pytest.mark.parametrize("value", [None, 0, -3, "abc", True, 2.5j, float("inf"), Decimal("Infinity")])
def test_search_input_replaces_invalid_page_values(value):
    search = SearchInput(page=value, per_page=value)

    assert search.page == DEFAULT_PAGE
    assert search.per_page == DEFAULT_PER_PAGE


def test_search_input_accepts_numeric_strings():
    search = SearchInput.model_validate({"page": "3", "per_page": "20"})

    assert (search.page, search.per_page) == (3, 20)


@pytest.mark.parametrize(
    ("given", "expected"),
    [(None, None), ("asc", "asc"), ("desc", "desc"), ("ASC", "desc"), ("random", "desc")],
)
def test_search_input_normalizes_sort_dir(given, expected):
    assert SearchInput(sort_dir=given).sort_dir == expected


def test_search_input_treats_blank_strings_as_absent():
    search = SearchInput(sort="", filter="")

    assert search.sort is None
    assert search.filter is None


def test_search_input_keeps_filter_verbatim():
    assert SearchInput(filter="  Lambari ").filter == "  Lambari "


def test_search_input_ignores_unknown_keys():
    search = SearchInput.model_validate({"page": 2, "limit": 10})

    assert search.page == 2


@pytest.mark.parametrize(("total", "per_page", "expected"), [(0, 15, 1), (15, 15, 1), (16, 15, 2), (7, 2, 4)])
def test_search_output_last_page(total, per_page, expected):
    output = SearchOutput[Record](data=[], total=total, current_page=1, per_page=per_page)

    assert output.last_page == expected


def test_record_is_immutable():
    record = Record()

    with pytest.raises(pydantic.ValidationError):
        record.id = "other"


def test_record_touched_refreshes_only_updated_at():
    record = Record(id="abc")

    touched = record.touched()

    assert touched.id == "abc"
    assert touched.created_at == record.created_at
    assert touched.updated_at >= record.updated_at
    assert touched is not record


def test_record_treats_naive_timestamps_as_utc():
    naive = datetime(2024, 1, 1, 9, 30)

    record = Record(created_at=naive, updated_at=naive)

    assert record.created_at == naive.replace(tzinfo=timezone.utc)
    assert record.updated_at.tzinfo is timezone.utc


def test_record_normalizes_aware_timestamps_to_utc():
    local = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=3)))

    record = Record(created_at=local)

    assert record.created_at == datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
    assert record.created_at.tzinfo is timezone.utc

"""
Pytest configuration for the record store.

Provides fixtures for:
- Building living beings with realistic field values
- A generic engine configured like a minimal entity (name filter, name sort)
- The living beings specialisation
- Settings isolation for tests that read the environment
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import pytest

from record_store.config import get_settings
from record_store.living_beings import LivingBeing, LivingBeingInMemoryRepository
from record_store.repositories import InMemoryRepository, field_contains, sortable

BASE_TIME = datetime(2025, 2, 1, 12, 0, tzinfo=timezone.utc)

LAMBARI_PROPS: dict[str, Any] = {
    "name": "Lambari",
    "scientific_name": "Astyanax ribeirae",
    "location": "América do Sul",
    "size": "5",
    "life_expectancy": 5,
    "ph": 6.4,
    "temperature": 26,
    "description": (
        "O aquário deverá conter plantas formando zonas sombrias com algumas áreas "
        "abertas para natação."
    ),
    "water_type_id": "c68687ed-4668-4109-b4e9-110aa4efeadb",
    "category_id": "01a454b9-6d58-44a0-aa64-c7ba5d7df6a3",
}


@pytest.fixture
def lambari_props() -> dict[str, Any]:
    return dict(LAMBARI_PROPS)


@pytest.fixture
def make_being() -> Callable[..., LivingBeing]:
    """
    Factory for living beings. Each call gets a distinct id; `minutes` offsets
    `created_at` from a fixed base so ordering by creation time is predictable.
    """

    def _make(name: str = "Lambari", minutes: int = 0, **overrides: Any) -> LivingBeing:
        created_at = BASE_TIME + timedelta(minutes=minutes)
        values = {
            **LAMBARI_PROPS,
            "name": name,
            "created_at": created_at,
            "updated_at": created_at,
            **overrides,
        }
        return LivingBeing(**values)

    return _make


@pytest.fixture
def stub_repository() -> InMemoryRepository[LivingBeing]:
    """Generic engine with a name filter, `name` as the only sortable field and no default sort."""
    return InMemoryRepository(
        LivingBeing,
        filter_predicate=field_contains("name"),
        sortable_fields=sortable("name"),
    )


@pytest.fixture
def living_being_repository() -> LivingBeingInMemoryRepository:
    return LivingBeingInMemoryRepository()


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """
    Clear the cached settings and the env vars they read, and run from an
    empty directory so no `.env` file is picked up.
    """
    for var in ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "DATA_FILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()

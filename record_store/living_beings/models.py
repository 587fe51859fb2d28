"""
LivingBeing record: one species entry of the aquarium catalogue.
"""
from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import Field, TypeAdapter

from record_store.domain.models import Record


class LivingBeing(Record):
    name: str = Field(..., description="Common name, unique within a repository.")
    scientific_name: str
    location: str = Field(..., description="Native region.")
    size: str = Field(..., description="Adult size in centimetres.")
    life_expectancy: int = Field(..., description="Years.")
    ph: float
    temperature: int = Field(..., description="Water temperature in Celsius.")
    description: str
    water_type_id: str
    category_id: str


_LIVING_BEINGS = TypeAdapter(List[LivingBeing])


def load_living_beings(path: Path) -> List[LivingBeing]:
    """Read a JSON array of living beings, e.g. one written by scripts/generate_data.py."""
    return _LIVING_BEINGS.validate_json(path.read_bytes())


__all__ = ["LivingBeing", "load_living_beings"]

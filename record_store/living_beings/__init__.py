"""
Living beings: the aquarium species catalogue built on the generic engine.
"""

from record_store.living_beings.models import LivingBeing, load_living_beings
from record_store.living_beings.repository import (
    LivingBeingInMemoryRepository,
    LivingBeingsRepository,
)

__all__ = [
    "LivingBeing",
    "LivingBeingInMemoryRepository",
    "LivingBeingsRepository",
    "load_living_beings",
]

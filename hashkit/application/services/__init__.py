"""Application services - provider registry and selection strategies."""

from hashkit.application.services.hasher_manager import HasherManager
from hashkit.application.services.selection import (
    DefaultSelection,
    SelectionStrategy,
    UniformSelection,
    WeightedSelection,
)

__all__ = [
    "HasherManager",
    "SelectionStrategy",
    "DefaultSelection",
    "UniformSelection",
    "WeightedSelection",
]

"""Immutable value objects shared by providers and the manager."""

from hashkit.domain.value_objects.params import (
    Argon2idParams,
    BcryptParams,
    ScryptParams,
)
from hashkit.domain.value_objects.weighted_choice import WeightedChoice

__all__ = ["Argon2idParams", "BcryptParams", "ScryptParams", "WeightedChoice"]

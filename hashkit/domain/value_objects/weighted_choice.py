"""Weighted provider choice used for gradual rollout of new parameters."""

from dataclasses import dataclass

from hashkit.domain.exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class WeightedChoice:
    """
    A provider identifier paired with its relative selection weight.

    Choices with a weight of zero (or below), or naming a provider that is
    not registered, are dropped from the candidate pool rather than
    rejected.

    Raises:
        InvalidConfigurationError: If ``identifier`` is not a string or
            ``weight`` is not an integer
    """

    identifier: str
    weight: int

    def __post_init__(self):
        if not isinstance(self.identifier, str):
            raise InvalidConfigurationError(
                f"Weighted choice identifier must be a string, got {self.identifier!r}"
            )
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise InvalidConfigurationError(
                f"Weighted choice weight must be an integer, got {self.weight!r}"
            )

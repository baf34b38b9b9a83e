"""Provider selection strategies for producing new hashes.

Strategies decide WHICH registered provider hashes a new credential:

- DefaultSelection: always the configured default
- UniformSelection: uniformly at random among candidates
- WeightedSelection: proportionally to per-provider weights, for canary
  rollout of a new algorithm or new parameters

Random draws come from the OS CSPRNG. The choice of algorithm affects the
security posture of the stored credential, so a predictable generator is
never used. The source is injectable so tests can pin the draw.
"""

import secrets
from abc import ABC, abstractmethod
from collections.abc import Callable, Collection, Iterable, Sequence
from typing import Optional

from hashkit.application.exceptions import EmptyCandidatePoolError
from hashkit.domain.exceptions import EntropyFailureError
from hashkit.domain.value_objects.weighted_choice import WeightedChoice

RandomBelow = Callable[[int], int]


def secure_randbelow(upper: int) -> int:
    """Return a uniform integer in ``[0, upper)`` from the OS CSPRNG."""
    try:
        return secrets.randbelow(upper)
    except OSError as exc:
        raise EntropyFailureError() from exc


class SelectionStrategy(ABC):
    """Picks one identifier out of the registered ones."""

    @abstractmethod
    def choose(self, registered_ids: Collection[str]) -> str:
        """
        Choose a provider identifier.

        Args:
            registered_ids: Canonical (lowercase) identifiers of the
                registered providers, in registration order

        Returns:
            The chosen canonical identifier

        Raises:
            EmptyCandidatePoolError: If no registered provider qualifies
        """


class DefaultSelection(SelectionStrategy):
    """Always choose the given identifier."""

    def __init__(self, default_id: str):
        self._default_id = default_id.lower()

    def choose(self, registered_ids: Collection[str]) -> str:
        if self._default_id not in registered_ids:
            raise EmptyCandidatePoolError(f"Provider '{self._default_id}' is not registered")
        return self._default_id


class UniformSelection(SelectionStrategy):
    """
    Choose uniformly at random.

    Without candidates (or with an empty list) every registered provider is
    eligible. With candidates, only the registered ones are; duplicates
    count once per occurrence.
    """

    def __init__(
        self,
        candidate_ids: Optional[Iterable[str]] = None,
        random_below: RandomBelow = secure_randbelow,
    ):
        self._candidate_ids = tuple(candidate_ids or ())
        self._random_below = random_below

    def choose(self, registered_ids: Collection[str]) -> str:
        if self._candidate_ids:
            pool = [c.lower() for c in self._candidate_ids if c.lower() in registered_ids]
        else:
            pool = list(registered_ids)
        if not pool:
            raise EmptyCandidatePoolError()
        return pool[self._random_below(len(pool))]


class WeightedSelection(SelectionStrategy):
    """
    Choose proportionally to weight (inverse-CDF sampling).

    A value ``r`` is drawn uniformly from ``[0, total_weight)`` and the first
    candidate whose cumulative weight exceeds ``r`` wins, so each identifier
    is picked with probability ``weight / total_weight``.
    """

    def __init__(
        self,
        choices: Sequence[WeightedChoice],
        random_below: RandomBelow = secure_randbelow,
    ):
        self._choices = tuple(choices)
        self._random_below = random_below

    def choose(self, registered_ids: Collection[str]) -> str:
        candidates = [
            (choice.identifier.lower(), choice.weight)
            for choice in self._choices
            if choice.weight > 0 and choice.identifier.lower() in registered_ids
        ]
        if not candidates:
            raise EmptyCandidatePoolError("No weighted providers to choose from")

        total = sum(weight for _, weight in candidates)
        r = self._random_below(total)
        cumulative = 0
        for identifier, weight in candidates:
            cumulative += weight
            if r < cumulative:
                return identifier
        raise ValueError(f"Random draw {r} outside [0, {total})")

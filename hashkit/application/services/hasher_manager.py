"""Hasher manager - application layer orchestration of hashing providers.

The manager owns an immutable registry of providers and coordinates the
password use cases:
1. Hash a new credential (default provider, named provider, or a selection
   strategy for gradual rollout)
2. Verify a password against any stored hash a registered provider produced
3. Decide whether a stored hash should be migrated, and migrate it on
   successful verification

DEPENDENCY INVERSION in action:
- HasherManager depends on IPasswordHasher (abstraction)
- No dependencies on argon2-cffi, pwdlib or hashlib
"""

import logging
import re
from collections.abc import Iterable, Sequence
from types import MappingProxyType
from typing import Optional

from hashkit.application.dtos.hash_dto import HashSelectionDTO, UpgradeResultDTO
from hashkit.application.exceptions import (
    DuplicateProviderIDError,
    InvalidProviderError,
    NoProvidersConfiguredError,
    UnknownDefaultProviderError,
    UnknownFormatError,
    UnknownProviderError,
)
from hashkit.application.services.selection import (
    SelectionStrategy,
    UniformSelection,
    WeightedSelection,
)
from hashkit.domain.services.password_hasher import IPasswordHasher, Password
from hashkit.domain.value_objects.weighted_choice import WeightedChoice

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"\$([A-Za-z0-9]+)\$")


def extract_tag(encoded: str) -> str:
    """
    Return the lowercased leading ``$<tag>$`` token, or ``""`` if absent.

    Example:
        >>> extract_tag("$argon2id$v=19$...")
        'argon2id'
        >>> extract_tag("plaintext")
        ''
    """
    match = _TAG_RE.match(encoded)
    if match is None:
        return ""
    return match.group(1).lower()


class HasherManager:
    """
    Registry of hashing providers with hash/verify/upgrade operations.

    The registry, the default identifier and every provider's parameters
    are fixed at construction. All calls only read shared state, so one
    manager can serve many threads without locking.

    Usage:
        manager = HasherManager(
            "argon2id",
            [Argon2idPasswordHasher(), BcryptPasswordHasher()],
        )
        encoded = manager.hash("correct horse battery staple")
        manager.verify("correct horse battery staple", encoded)  # True

        result = manager.verify_and_upgrade(password, stored_hash)
        if result.upgraded:
            save(result.new_encoded)
    """

    def __init__(self, default_identifier: str, providers: Iterable[IPasswordHasher]):
        """
        Build the registry.

        Identifiers are canonicalized to lowercase once here, and every
        lookup canonicalizes its key the same way.

        Args:
            default_identifier: Provider used for new hashes
            providers: Providers to register

        Raises:
            NoProvidersConfiguredError: If ``providers`` is empty
            InvalidProviderError: If a provider is None or has a blank identifier
            DuplicateProviderIDError: If two identifiers collide case-insensitively
            UnknownDefaultProviderError: If ``default_identifier`` is not registered
        """
        providers = list(providers)
        if not providers:
            raise NoProvidersConfiguredError()

        registry: dict[str, IPasswordHasher] = {}
        for provider in providers:
            if provider is None or not (provider.identifier or "").strip():
                raise InvalidProviderError("Provider must have a non-empty identifier")
            identifier = provider.identifier.lower()
            if identifier in registry:
                raise DuplicateProviderIDError(f"Duplicate provider identifier '{identifier}'")
            registry[identifier] = provider

        default_id = (default_identifier or "").lower()
        if default_id not in registry:
            raise UnknownDefaultProviderError(
                f"Default provider '{default_id}' is not registered"
            )

        self._providers = MappingProxyType(registry)
        self._default_id = default_id

        logger.info(
            f"Hasher manager ready with providers {list(registry)} (default: {default_id})"
        )

    @property
    def default_identifier(self) -> str:
        return self._default_id

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Registered identifiers, in registration order."""
        return tuple(self._providers)

    def get_provider(self, identifier: str) -> IPasswordHasher:
        """
        Look up a registered provider.

        Raises:
            UnknownProviderError: If ``identifier`` is not registered
        """
        provider = self._providers.get((identifier or "").lower())
        if provider is None:
            raise UnknownProviderError(f"Provider '{identifier}' is not registered")
        return provider

    # Hashing

    def hash(self, password: Password) -> str:
        """Hash with the default provider."""
        return self._providers[self._default_id].hash(password)

    def hash_with(self, identifier: str, password: Password) -> str:
        """
        Hash with a named provider.

        Raises:
            UnknownProviderError: If ``identifier`` is not registered
        """
        return self.get_provider(identifier).hash(password)

    def hash_using(self, password: Password, strategy: SelectionStrategy) -> HashSelectionDTO:
        """
        Hash with whichever provider ``strategy`` picks.

        Returns:
            HashSelectionDTO with the chosen identifier and the encoded hash

        Raises:
            EmptyCandidatePoolError: If the strategy has no valid candidate
            UnknownProviderError: If the strategy picks an unregistered identifier
        """
        chosen = strategy.choose(self.identifiers)
        provider = self.get_provider(chosen)
        provider_id = provider.identifier.lower()
        logger.debug(f"Selected provider '{provider_id}' via {type(strategy).__name__}")
        return HashSelectionDTO(provider_id=provider_id, encoded=provider.hash(password))

    def hash_random(
        self,
        password: Password,
        candidate_ids: Optional[Iterable[str]] = None,
    ) -> HashSelectionDTO:
        """
        Hash with a provider picked uniformly at random.

        Args:
            password: The plain password
            candidate_ids: Identifiers to choose among; every registered
                provider when omitted or empty

        Raises:
            EmptyCandidatePoolError: If none of ``candidate_ids`` is registered
        """
        return self.hash_using(password, UniformSelection(candidate_ids))

    def hash_weighted(
        self,
        password: Password,
        weighted_choices: Sequence[WeightedChoice],
    ) -> HashSelectionDTO:
        """
        Hash with a provider picked proportionally to its weight.

        Choices with a non-positive weight or an unregistered identifier are
        ignored.

        Example:
            manager.hash_weighted(
                password,
                [WeightedChoice("argon2id", 90), WeightedChoice("bcrypt", 10)],
            )

        Raises:
            EmptyCandidatePoolError: If no choice is left after filtering
        """
        return self.hash_using(password, WeightedSelection(weighted_choices))

    # Verification

    def verify(self, password: Password, encoded: str) -> bool:
        """
        Verify a password against a hash produced by any registered provider.

        Returns:
            True if the password matches, False otherwise

        Raises:
            UnknownFormatError: If no registered provider recognises ``encoded``
            MalformedEncodingError: If the detected provider cannot parse it
        """
        return self._detect(encoded).verify(password, encoded)

    def needs_rehash(self, encoded: str) -> bool:
        """
        Check whether a stored hash should be regenerated.

        True when the hash was produced by a provider other than the default,
        when the producing provider reports outdated parameters, or when no
        registered provider recognises the format at all.
        """
        try:
            provider = self._detect(encoded)
        except UnknownFormatError:
            return True
        if provider.identifier.lower() != self._default_id:
            return True
        return provider.needs_rehash(encoded)

    def verify_and_upgrade(self, password: Password, encoded: str) -> UpgradeResultDTO:
        """
        Verify a password and, on success, migrate an outdated hash.

        This supports silent parameter/algorithm migration at login without
        forcing a password reset.

        Workflow:
        1. Verify (errors propagate, mismatch returns verified=False)
        2. If the hash needs a rehash, hash again with the default provider

        Returns:
            UpgradeResultDTO; ``new_encoded`` is set only when ``upgraded``
        """
        if not self.verify(password, encoded):
            return UpgradeResultDTO(verified=False)

        if not self.needs_rehash(encoded):
            return UpgradeResultDTO(verified=True)

        new_encoded = self.hash(password)
        logger.info(
            f"Upgraded stored hash from '{extract_tag(encoded) or 'native'}' "
            f"to '{self._default_id}'"
        )
        return UpgradeResultDTO(verified=True, upgraded=True, new_encoded=new_encoded)

    def _detect(self, encoded: str) -> IPasswordHasher:
        """
        Find the provider that produced ``encoded``.

        The leading ``$tag$`` is looked up first; if it names no registered
        provider, each provider's own format check is tried in registration
        order (this is how native bcrypt strings are recognised).
        """
        tag = extract_tag(encoded)
        provider = self._providers.get(tag) if tag else None
        if provider is not None:
            return provider

        for candidate in self._providers.values():
            if candidate.identify(encoded):
                return candidate

        logger.warning(f"Unrecognised hash format (tag: '{tag}')")
        raise UnknownFormatError(f"Unknown hash format (tag: '{tag}')")

    def __repr__(self) -> str:
        return f"HasherManager(default={self._default_id!r}, providers={list(self._providers)!r})"

"""Password hashing interface - domain service abstraction.

This interface defines the contract every hashing provider implements.
The manager (application layer) only ever talks to this abstraction, so a
provider can be swapped or added without touching dispatch logic.

Every provider must:
1. Produce a self-describing encoded string (algorithm tag, parameters,
   salt and digest in one value)
2. Verify against an encoded string using the parameters stored IN it
3. Report whether a stored string was produced with outdated parameters

Providers do NOT:
- Persist anything
- Retry on failure
- Treat a wrong password as an error
"""

from abc import ABC, abstractmethod
from typing import Union

Password = Union[str, bytes]


def ensure_bytes(password: Password) -> bytes:
    """Encode ``str`` passwords as UTF-8; pass ``bytes`` through."""
    if isinstance(password, str):
        return password.encode("utf-8")
    return password


class IPasswordHasher(ABC):
    """
    Interface for a single password hashing algorithm.

    Implementations own an immutable parameter set and must be safe to call
    from several threads at once. They never mutate state after
    construction.
    """

    @property
    @abstractmethod
    def identifier(self) -> str:
        """
        Stable lowercase tag of the algorithm (e.g. ``"argon2id"``).

        The manager registers providers under this identifier and uses it to
        route encoded hashes back to the provider that produced them.
        """

    @abstractmethod
    def hash(self, password: Password) -> str:
        """
        Hash a password with a fresh random salt and the current parameters.

        Args:
            password: The plain password (``str`` is UTF-8 encoded)

        Returns:
            Self-describing encoded hash

        Raises:
            EntropyFailureError: If the secure random source failed
            DerivationError: If the key-derivation primitive failed

        Example:
            hasher = SomePasswordHasher()
            encoded = hasher.hash("my_password")
            # encoded might be: "$argon2id$v=19$m=65536,t=3,p=2$..."
        """

    @abstractmethod
    def verify(self, password: Password, encoded: str) -> bool:
        """
        Verify a password against an encoded hash produced by this algorithm.

        The digest is re-derived with the parameters embedded in ``encoded``
        (not the provider's current ones) and compared in constant time.

        Args:
            password: The plain password to check
            encoded: The stored encoded hash

        Returns:
            True if the password matches, False otherwise

        Raises:
            MalformedEncodingError: If ``encoded`` does not follow this
                provider's exact format
        """

    @abstractmethod
    def needs_rehash(self, encoded: str) -> bool:
        """
        Check whether an encoded hash was produced with outdated parameters.

        Unparsable input needs a rehash too. It is never reported as up to
        date.

        Args:
            encoded: The stored encoded hash

        Returns:
            True if the hash should be regenerated with current parameters
        """

    @abstractmethod
    def identify(self, encoded: str) -> bool:
        """
        Cheap check whether ``encoded`` looks like this provider's output.

        Used by the manager when the leading ``$tag$`` does not name a
        registered provider (e.g. bcrypt's ``$2b$`` prefix).
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identifier={self.identifier!r})"

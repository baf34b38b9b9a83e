"""Bcrypt password hasher implementation using pwdlib.

Bcrypt strings are stored in the algorithm's own native format
(``$2a$``, ``$2b$`` or ``$2y$``). The string is treated as opaque: pwdlib and
the bcrypt library parse it, we only check its overall shape and read the
cost factor for rehash decisions.
"""

import logging
import re

from pwdlib.hashers.bcrypt import BcryptHasher

from hashkit.domain.exceptions import (
    DerivationError,
    EntropyFailureError,
    MalformedEncodingError,
)
from hashkit.domain.services.password_hasher import IPasswordHasher, Password, ensure_bytes
from hashkit.domain.value_objects.params import BcryptParams

logger = logging.getLogger(__name__)

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72

_BCRYPT_RE = re.compile(r"\$2[aby]\$(\d{2})\$[./A-Za-z0-9]{53}")


def is_bcrypt_native(encoded: str) -> bool:
    return encoded.startswith(BCRYPT_PREFIXES)


class BcryptPasswordHasher(IPasswordHasher):
    """
    Password hasher using bcrypt via pwdlib.

    Passwords longer than 72 bytes are truncated to 72 bytes before hashing
    and verifying, which is what bcrypt itself has always done.

    Usage:
        hasher = BcryptPasswordHasher(BcryptParams(cost=12))
        hashed = hasher.hash("user_password_123")
        # Returns: "$2b$12$<22 char salt><31 char digest>"
    """

    def __init__(self, params: BcryptParams | None = None):
        self._params = params or BcryptParams()
        self._hasher = BcryptHasher(rounds=self._params.cost)

    @property
    def identifier(self) -> str:
        return "bcrypt"

    @property
    def params(self) -> BcryptParams:
        return self._params

    def hash(self, password: Password) -> str:
        try:
            return self._hasher.hash(_truncate(password))
        except OSError as exc:
            raise EntropyFailureError() from exc
        except ValueError as exc:
            logger.error(f"Bcrypt hashing failed: {exc}")
            raise DerivationError(f"Bcrypt hashing failed: {exc}") from exc

    def verify(self, password: Password, encoded: str) -> bool:
        """
        Verify a password against a native bcrypt string.

        Raises:
            MalformedEncodingError: If ``encoded`` is not a well-formed
                ``$2a$``/``$2b$``/``$2y$`` bcrypt string
        """
        if _BCRYPT_RE.fullmatch(encoded) is None:
            raise MalformedEncodingError("Invalid bcrypt string")
        try:
            return bool(self._hasher.verify(_truncate(password), encoded))
        except ValueError as exc:
            raise MalformedEncodingError(f"Invalid bcrypt string: {exc}") from exc

    def needs_rehash(self, encoded: str) -> bool:
        match = _BCRYPT_RE.fullmatch(encoded)
        if match is None:
            return True
        return int(match.group(1)) != self._params.cost

    def identify(self, encoded: str) -> bool:
        return is_bcrypt_native(encoded)


def _truncate(password: Password) -> bytes:
    return ensure_bytes(password)[:BCRYPT_MAX_PASSWORD_BYTES]

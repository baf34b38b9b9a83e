"""Argon2id password hasher implementation using argon2-cffi.

This is an INFRASTRUCTURE detail. The domain layer (IPasswordHasher interface)
defines WHAT a provider does, while this implementation defines HOW: the raw
Argon2id primitive from argon2-cffi plus our own PHC codec.

Dependency flow:
    HasherManager (application) → IPasswordHasher (domain) ← Argon2idPasswordHasher (infrastructure)

``argon2.PasswordHasher`` renders salt/digest in the standard base64
alphabet; stored hashes here use the URL-safe alphabet, so only the raw
primitive is called.
"""

import logging

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from hashkit.domain.exceptions import DerivationError, MalformedEncodingError
from hashkit.domain.services.password_hasher import IPasswordHasher, Password, ensure_bytes
from hashkit.domain.value_objects.params import Argon2idParams
from hashkit.infrastructure.security.codecs.argon2id_codec import (
    TAG,
    VERSION,
    Argon2idHash,
    decode_argon2id,
    encode_argon2id,
)
from hashkit.infrastructure.security.encoding import constant_time_equals, random_bytes

logger = logging.getLogger(__name__)


class Argon2idPasswordHasher(IPasswordHasher):
    """
    Production password hasher using the Argon2id algorithm.

    Argon2 is the winner of the Password Hashing Competition (2015) and is
    recommended by OWASP for password storage. The Argon2id variant provides
    both side-channel and GPU attack resistance.

    Usage:
        hasher = Argon2idPasswordHasher(Argon2idParams(memory_kib=65536, iterations=3, parallelism=2))

        hashed = hasher.hash("user_password_123")
        # Returns: "$argon2id$v=19$m=65536,t=3,p=2$<salt>$<digest>"

        hasher.verify("user_password_123", hashed)  # True
        hasher.verify("wrong_password", hashed)  # False
    """

    def __init__(self, params: Argon2idParams | None = None):
        self._params = params or Argon2idParams()

    @property
    def identifier(self) -> str:
        return TAG

    @property
    def params(self) -> Argon2idParams:
        return self._params

    def hash(self, password: Password) -> str:
        salt = random_bytes(self._params.salt_length)
        digest = self._derive(
            ensure_bytes(password),
            salt,
            self._params.iterations,
            self._params.memory_kib,
            self._params.parallelism,
            self._params.key_length,
        )
        return encode_argon2id(
            Argon2idHash(
                memory_kib=self._params.memory_kib,
                iterations=self._params.iterations,
                parallelism=self._params.parallelism,
                salt=salt,
                digest=digest,
            )
        )

    def verify(self, password: Password, encoded: str) -> bool:
        """
        Verify a password against an Argon2id PHC string.

        The digest is re-derived with the memory/time/parallelism stored in
        the string and the stored digest length, so hashes produced under
        older parameters keep verifying.

        Raises:
            MalformedEncodingError: If ``encoded`` is not a valid Argon2id
                PHC string
        """
        record = decode_argon2id(encoded)
        calculated = self._derive(
            ensure_bytes(password),
            record.salt,
            record.iterations,
            record.memory_kib,
            record.parallelism,
            len(record.digest),
        )
        return constant_time_equals(record.digest, calculated)

    def needs_rehash(self, encoded: str) -> bool:
        try:
            record = decode_argon2id(encoded)
        except MalformedEncodingError:
            return True
        return (
            record.memory_kib != self._params.memory_kib
            or record.iterations != self._params.iterations
            or record.parallelism != self._params.parallelism
            or len(record.salt) != self._params.salt_length
            or len(record.digest) != self._params.key_length
        )

    def identify(self, encoded: str) -> bool:
        return encoded.startswith(f"${TAG}$")

    @staticmethod
    def _derive(
        password: bytes,
        salt: bytes,
        iterations: int,
        memory_kib: int,
        parallelism: int,
        key_length: int,
    ) -> bytes:
        try:
            return hash_secret_raw(
                secret=password,
                salt=salt,
                time_cost=iterations,
                memory_cost=memory_kib,
                parallelism=parallelism,
                hash_len=key_length,
                type=Type.ID,
                version=VERSION,
            )
        except HashingError as exc:
            logger.error(f"Argon2id derivation failed: {exc}")
            raise DerivationError(f"Argon2id derivation failed: {exc}") from exc

"""Scrypt password hasher implementation using hashlib (OpenSSL).

Scrypt is memory-hard like Argon2id and is kept for deployments that already
store scrypt hashes or cannot ship argon2-cffi everywhere.
"""

import hashlib
import logging

from hashkit.domain.exceptions import DerivationError, MalformedEncodingError
from hashkit.domain.services.password_hasher import IPasswordHasher, Password, ensure_bytes
from hashkit.domain.value_objects.params import ScryptParams, scrypt_max_memory
from hashkit.infrastructure.security.codecs.scrypt_codec import (
    TAG,
    ScryptHash,
    decode_scrypt,
    encode_scrypt,
)
from hashkit.infrastructure.security.encoding import constant_time_equals, random_bytes

logger = logging.getLogger(__name__)


class ScryptPasswordHasher(IPasswordHasher):
    """
    Password hasher using scrypt.

    Produces ``$scrypt$N=<N>,r=<r>,p=<p>$<salt>$<digest>`` strings.
    """

    def __init__(self, params: ScryptParams | None = None):
        self._params = params or ScryptParams()

    @property
    def identifier(self) -> str:
        return TAG

    @property
    def params(self) -> ScryptParams:
        return self._params

    def hash(self, password: Password) -> str:
        salt = random_bytes(self._params.salt_length)
        digest = self._derive(
            ensure_bytes(password),
            salt,
            self._params.n,
            self._params.r,
            self._params.p,
            self._params.key_length,
        )
        return encode_scrypt(
            ScryptHash(n=self._params.n, r=self._params.r, p=self._params.p, salt=salt, digest=digest)
        )

    def verify(self, password: Password, encoded: str) -> bool:
        record = decode_scrypt(encoded)
        calculated = self._derive(
            ensure_bytes(password),
            record.salt,
            record.n,
            record.r,
            record.p,
            len(record.digest),
        )
        return constant_time_equals(record.digest, calculated)

    def needs_rehash(self, encoded: str) -> bool:
        try:
            record = decode_scrypt(encoded)
        except MalformedEncodingError:
            return True
        if (record.n, record.r, record.p) != (self._params.n, self._params.r, self._params.p):
            return True
        return (
            len(record.salt) != self._params.salt_length
            or len(record.digest) != self._params.key_length
        )

    def identify(self, encoded: str) -> bool:
        return encoded.startswith(f"${TAG}$")

    @staticmethod
    def _derive(password: bytes, salt: bytes, n: int, r: int, p: int, key_length: int) -> bytes:
        try:
            return hashlib.scrypt(
                password,
                salt=salt,
                n=n,
                r=r,
                p=p,
                maxmem=scrypt_max_memory(n, r, p),
                dklen=key_length,
            )
        except (ValueError, MemoryError) as exc:
            logger.error(f"Scrypt derivation failed: {exc}")
            raise DerivationError(f"Scrypt derivation failed: {exc}") from exc

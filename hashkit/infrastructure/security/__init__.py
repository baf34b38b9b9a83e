"""Concrete hashing providers."""

from hashkit.infrastructure.security.argon2id_password_hasher import Argon2idPasswordHasher
from hashkit.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from hashkit.infrastructure.security.scrypt_password_hasher import ScryptPasswordHasher

__all__ = ["Argon2idPasswordHasher", "BcryptPasswordHasher", "ScryptPasswordHasher"]

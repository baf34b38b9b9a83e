"""Parsers/formatters for the self-describing hash formats."""

from hashkit.infrastructure.security.codecs.argon2id_codec import (
    Argon2idHash,
    decode_argon2id,
    encode_argon2id,
)
from hashkit.infrastructure.security.codecs.scrypt_codec import (
    ScryptHash,
    decode_scrypt,
    encode_scrypt,
)

__all__ = [
    "Argon2idHash",
    "ScryptHash",
    "decode_argon2id",
    "decode_scrypt",
    "encode_argon2id",
    "encode_scrypt",
]

"""Scrypt PHC-like string codec.

Format::

    $scrypt$N=<cost>,r=<block_size>,p=<parallelism>$<salt>$<digest>

Salt and digest use the standard base64 alphabet without padding.
"""

from dataclasses import dataclass

from hashkit.domain.exceptions import MalformedEncodingError
from hashkit.domain.value_objects.params import scrypt_cost_is_valid
from hashkit.infrastructure.security.codecs.phc import (
    check_range,
    parse_params,
    split_fields,
)
from hashkit.infrastructure.security.encoding import b64decode_nopad, b64encode_nopad

TAG = "scrypt"


@dataclass(frozen=True)
class ScryptHash:
    """Everything stored in a scrypt hash string."""

    n: int
    r: int
    p: int
    salt: bytes
    digest: bytes


def encode_scrypt(record: ScryptHash) -> str:
    return (
        f"${TAG}$N={record.n},r={record.r},p={record.p}"
        f"${b64encode_nopad(record.salt)}"
        f"${b64encode_nopad(record.digest)}"
    )


def decode_scrypt(encoded: str) -> ScryptHash:
    """
    Parse a scrypt hash string.

    Raises:
        MalformedEncodingError: On any deviation from the exact format,
            out-of-range parameter, or corrupt base64 field
    """
    _, params, salt_b64, digest_b64 = split_fields(encoded, TAG, 4)

    values = parse_params(params, ("N", "r", "p"), TAG)
    r = check_range(values["r"], 1, 2**30 - 1, "r", TAG)
    n = values["N"]
    if not scrypt_cost_is_valid(n, r):
        raise MalformedEncodingError(f"Parameter 'N' out of range in {TAG} hash")
    p = check_range(values["p"], 1, 2**30 - 1, "p", TAG)
    if r * p >= 2**30:
        raise MalformedEncodingError(f"Parameters 'r*p' too large in {TAG} hash")

    salt = b64decode_nopad(salt_b64)
    digest = b64decode_nopad(digest_b64)
    if len(salt) < 8:
        raise MalformedEncodingError(f"Salt too short in {TAG} hash")
    if len(digest) < 4:
        raise MalformedEncodingError(f"Digest too short in {TAG} hash")

    return ScryptHash(n=n, r=r, p=p, salt=salt, digest=digest)

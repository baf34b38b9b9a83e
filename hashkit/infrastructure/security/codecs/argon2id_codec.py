"""Argon2id PHC string codec.

Format (version fixed at 19)::

    $argon2id$v=19$m=<memory_kib>,t=<iterations>,p=<parallelism>$<salt>$<digest>

Salt and digest use the URL-safe base64 alphabet without padding.
"""

from dataclasses import dataclass

from hashkit.domain.exceptions import MalformedEncodingError
from hashkit.domain.value_objects.params import UINT32_MAX
from hashkit.infrastructure.security.codecs.phc import (
    check_range,
    parse_params,
    split_fields,
)
from hashkit.infrastructure.security.encoding import (
    urlsafe_b64decode_nopad,
    urlsafe_b64encode_nopad,
)

TAG = "argon2id"
VERSION = 19


@dataclass(frozen=True)
class Argon2idHash:
    """Everything stored in an Argon2id PHC string."""

    memory_kib: int
    iterations: int
    parallelism: int
    salt: bytes
    digest: bytes


def encode_argon2id(record: Argon2idHash) -> str:
    return (
        f"${TAG}$v={VERSION}"
        f"$m={record.memory_kib},t={record.iterations},p={record.parallelism}"
        f"${urlsafe_b64encode_nopad(record.salt)}"
        f"${urlsafe_b64encode_nopad(record.digest)}"
    )


def decode_argon2id(encoded: str) -> Argon2idHash:
    """
    Parse an Argon2id PHC string.

    Raises:
        MalformedEncodingError: On any deviation from the exact format,
            out-of-range parameter, or corrupt base64 field
    """
    _, version, params, salt_b64, digest_b64 = split_fields(encoded, TAG, 5)
    if version != f"v={VERSION}":
        raise MalformedEncodingError(f"Unsupported {TAG} version field '{version}'")

    values = parse_params(params, ("m", "t", "p"), TAG)
    parallelism = check_range(values["p"], 1, 255, "p", TAG)
    memory_kib = check_range(values["m"], 8 * parallelism, UINT32_MAX, "m", TAG)
    iterations = check_range(values["t"], 1, UINT32_MAX, "t", TAG)

    salt = urlsafe_b64decode_nopad(salt_b64)
    digest = urlsafe_b64decode_nopad(digest_b64)
    if len(salt) < 8:
        raise MalformedEncodingError(f"Salt too short in {TAG} hash")
    if len(digest) < 4:
        raise MalformedEncodingError(f"Digest too short in {TAG} hash")

    return Argon2idHash(
        memory_kib=memory_kib,
        iterations=iterations,
        parallelism=parallelism,
        salt=salt,
        digest=digest,
    )

"""Low-level helpers shared by the providers and codecs.

- Unpadded base64 (standard and URL-safe alphabets) for salt/digest fields
- Salt bytes from the OS CSPRNG, with failures surfaced as EntropyFailureError
- Constant-time digest comparison
"""

import base64
import binascii
import hmac
import re
import secrets

from hashkit.domain.exceptions import EntropyFailureError, MalformedEncodingError

_STD_ALPHABET = re.compile(r"[A-Za-z0-9+/]+")
_URLSAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]+")


def b64encode_nopad(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode_nopad(text: str) -> bytes:
    """Decode unpadded standard base64, rejecting anything outside the alphabet."""
    return _decode(text, _STD_ALPHABET, base64.b64decode)


def urlsafe_b64encode_nopad(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def urlsafe_b64decode_nopad(text: str) -> bytes:
    """Decode unpadded URL-safe base64, rejecting anything outside the alphabet."""
    return _decode(text, _URLSAFE_ALPHABET, base64.urlsafe_b64decode)


def _decode(text, alphabet, decoder) -> bytes:
    if not alphabet.fullmatch(text):
        raise MalformedEncodingError("Invalid base64 field")
    # A single leftover character can never encode a whole byte
    if len(text) % 4 == 1:
        raise MalformedEncodingError("Invalid base64 field length")
    try:
        return decoder(text + "=" * (-len(text) % 4))
    except (binascii.Error, ValueError) as exc:
        raise MalformedEncodingError("Invalid base64 field") from exc


def random_bytes(length: int) -> bytes:
    """Read ``length`` bytes from the OS CSPRNG."""
    try:
        return secrets.token_bytes(length)
    except OSError as exc:
        raise EntropyFailureError() from exc


def constant_time_equals(expected: bytes, actual: bytes) -> bool:
    """
    Compare two digests without leaking where they differ.

    A length mismatch still runs a full comparison over ``expected`` so the
    time taken depends only on the expected length.
    """
    if len(expected) != len(actual):
        hmac.compare_digest(expected, expected)
        return False
    return hmac.compare_digest(expected, actual)

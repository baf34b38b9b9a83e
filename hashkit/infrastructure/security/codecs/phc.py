"""Shared pieces of the PHC-style ``$tag$params$salt$digest`` layout."""

import re

from hashkit.domain.exceptions import MalformedEncodingError

_DIGITS_RE = re.compile(r"[0-9]+")


def split_fields(encoded: str, tag: str, count: int) -> list[str]:
    """
    Split ``encoded`` on ``$`` and check the field count and tag.

    The leading empty field (before the first ``$``) is dropped, so
    ``count`` is the number of ``$``-separated sections including the tag.
    """
    parts = encoded.split("$")
    if len(parts) != count + 1 or parts[0] != "":
        raise MalformedEncodingError(
            f"Expected {count} '$'-separated fields in {tag} hash"
        )
    if parts[1] != tag:
        raise MalformedEncodingError(f"Expected '${tag}$' prefix")
    return parts[1:]


def parse_params(section: str, keys: tuple[str, ...], tag: str) -> dict[str, int]:
    """
    Parse a ``k1=v1,k2=v2,...`` section with exactly ``keys`` in order.

    Values must be non-empty ASCII digit strings.
    """
    items = section.split(",")
    if len(items) != len(keys):
        raise MalformedEncodingError(f"Expected parameters {','.join(keys)} in {tag} hash")
    values: dict[str, int] = {}
    for item, key in zip(items, keys):
        name, sep, raw = item.partition("=")
        if not sep or name != key or not _DIGITS_RE.fullmatch(raw):
            raise MalformedEncodingError(f"Invalid parameter '{key}' in {tag} hash")
        values[key] = int(raw)
    return values


def check_range(value: int, low: int, high: int, name: str, tag: str) -> int:
    if not low <= value <= high:
        raise MalformedEncodingError(f"Parameter '{name}' out of range in {tag} hash")
    return value

"""Domain exceptions - provider and parameter rule violations."""

from hashkit.domain.exceptions.domain_exceptions import (
    DerivationError,
    DomainException,
    EntropyFailureError,
    InvalidConfigurationError,
    MalformedEncodingError,
)

__all__ = [
    "DomainException",
    "InvalidConfigurationError",
    "MalformedEncodingError",
    "EntropyFailureError",
    "DerivationError",
]

"""Application layer exceptions."""

from hashkit.application.exceptions.exceptions import (
    ApplicationError,
    DuplicateProviderIDError,
    EmptyCandidatePoolError,
    InvalidProviderError,
    NoProvidersConfiguredError,
    UnknownDefaultProviderError,
    UnknownFormatError,
    UnknownProviderError,
)

__all__ = [
    "ApplicationError",
    "UnknownProviderError",
    "EmptyCandidatePoolError",
    "UnknownFormatError",
    "NoProvidersConfiguredError",
    "InvalidProviderError",
    "DuplicateProviderIDError",
    "UnknownDefaultProviderError",
]

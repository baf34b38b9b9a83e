"""hashkit - pluggable password hashing with self-describing encoded hashes.

Public API:

    from hashkit import HasherManager, Argon2idPasswordHasher, BcryptPasswordHasher

    manager = HasherManager("argon2id", [Argon2idPasswordHasher(), BcryptPasswordHasher()])
    encoded = manager.hash("correct horse battery staple")
    manager.verify("correct horse battery staple", encoded)  # True
"""

from hashkit.application.dtos import HashSelectionDTO, UpgradeResultDTO
from hashkit.application.exceptions import (
    ApplicationError,
    DuplicateProviderIDError,
    EmptyCandidatePoolError,
    InvalidProviderError,
    NoProvidersConfiguredError,
    UnknownDefaultProviderError,
    UnknownFormatError,
    UnknownProviderError,
)
from hashkit.application.services import (
    DefaultSelection,
    HasherManager,
    SelectionStrategy,
    UniformSelection,
    WeightedSelection,
)
from hashkit.domain.exceptions import (
    DerivationError,
    DomainException,
    EntropyFailureError,
    InvalidConfigurationError,
    MalformedEncodingError,
)
from hashkit.domain.services import IPasswordHasher
from hashkit.domain.value_objects import (
    Argon2idParams,
    BcryptParams,
    ScryptParams,
    WeightedChoice,
)
from hashkit.infrastructure.factory import create_manager, default_manager, extended_manager
from hashkit.infrastructure.security import (
    Argon2idPasswordHasher,
    BcryptPasswordHasher,
    ScryptPasswordHasher,
)

__version__ = "1.0.0"

__all__ = [
    "HasherManager",
    "IPasswordHasher",
    "Argon2idPasswordHasher",
    "BcryptPasswordHasher",
    "ScryptPasswordHasher",
    "Argon2idParams",
    "BcryptParams",
    "ScryptParams",
    "WeightedChoice",
    "SelectionStrategy",
    "DefaultSelection",
    "UniformSelection",
    "WeightedSelection",
    "HashSelectionDTO",
    "UpgradeResultDTO",
    "create_manager",
    "default_manager",
    "extended_manager",
    "DomainException",
    "InvalidConfigurationError",
    "MalformedEncodingError",
    "EntropyFailureError",
    "DerivationError",
    "ApplicationError",
    "UnknownProviderError",
    "EmptyCandidatePoolError",
    "UnknownFormatError",
    "NoProvidersConfiguredError",
    "InvalidProviderError",
    "DuplicateProviderIDError",
    "UnknownDefaultProviderError",
]

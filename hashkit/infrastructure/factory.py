"""Manager construction - the COMPOSITION ROOT.

This is the only place that maps configuration onto concrete providers and
wires them into a HasherManager. The application layer never imports the
concrete providers; it only knows IPasswordHasher.
"""

from collections.abc import Callable
from typing import Optional

from hashkit.application.services.hasher_manager import HasherManager
from hashkit.domain.services.password_hasher import IPasswordHasher
from hashkit.domain.value_objects.params import Argon2idParams, BcryptParams, ScryptParams
from hashkit.infrastructure.config.settings import Settings, get_settings
from hashkit.infrastructure.security.argon2id_password_hasher import Argon2idPasswordHasher
from hashkit.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from hashkit.infrastructure.security.scrypt_password_hasher import ScryptPasswordHasher


def _argon2id_from(settings: Settings) -> IPasswordHasher:
    return Argon2idPasswordHasher(
        Argon2idParams(
            memory_kib=settings.argon2_memory_kib,
            iterations=settings.argon2_iterations,
            parallelism=settings.argon2_parallelism,
            salt_length=settings.argon2_salt_length,
            key_length=settings.argon2_key_length,
        )
    )


def _bcrypt_from(settings: Settings) -> IPasswordHasher:
    return BcryptPasswordHasher(BcryptParams(cost=settings.bcrypt_cost))


def _scrypt_from(settings: Settings) -> IPasswordHasher:
    return ScryptPasswordHasher(
        ScryptParams(
            n=settings.scrypt_n,
            r=settings.scrypt_r,
            p=settings.scrypt_p,
            salt_length=settings.scrypt_salt_length,
            key_length=settings.scrypt_key_length,
        )
    )


_BUILDERS: dict[str, Callable[[Settings], IPasswordHasher]] = {
    "argon2id": _argon2id_from,
    "bcrypt": _bcrypt_from,
    "scrypt": _scrypt_from,
}


def build_providers(settings: Settings) -> list[IPasswordHasher]:
    """
    Create the providers listed in ``settings.enabled_providers``.

    Raises:
        InvalidConfigurationError: If a configured parameter is out of range
    """
    return [_BUILDERS[name](settings) for name in settings.enabled_providers_list]


def create_manager(settings: Optional[Settings] = None) -> HasherManager:
    """
    Build a manager from settings (environment by default).

    Example:
        manager = create_manager()
        encoded = manager.hash("secret")
    """
    settings = settings or get_settings()
    return HasherManager(settings.default_provider, build_providers(settings))


def default_manager() -> HasherManager:
    """Argon2id (default) and bcrypt, both with baseline parameters."""
    return HasherManager("argon2id", [Argon2idPasswordHasher(), BcryptPasswordHasher()])


def extended_manager() -> HasherManager:
    """Argon2id (default), bcrypt and scrypt, all with baseline parameters."""
    return HasherManager(
        "argon2id",
        [Argon2idPasswordHasher(), BcryptPasswordHasher(), ScryptPasswordHasher()],
    )

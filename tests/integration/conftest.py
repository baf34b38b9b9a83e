"""Integration test fixtures.

Managers here use production-strength parameters, so these tests are slower
than the unit suite.
"""

import pytest

from hashkit.application.services.hasher_manager import HasherManager
from hashkit.domain.value_objects.params import Argon2idParams, BcryptParams
from hashkit.infrastructure.security.argon2id_password_hasher import Argon2idPasswordHasher
from hashkit.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher


@pytest.fixture
def production_manager() -> HasherManager:
    """Argon2id (64 MiB, t=3, p=2) as default with bcrypt cost 12 for legacy hashes."""
    return HasherManager(
        "argon2id",
        [
            Argon2idPasswordHasher(Argon2idParams(memory_kib=65536, iterations=3, parallelism=2)),
            BcryptPasswordHasher(BcryptParams(cost=12)),
        ],
    )

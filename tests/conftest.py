"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

Real providers here use the cheapest parameters each algorithm accepts, so
round trips stay fast. Manager-level tests that draw many times use
FakePasswordHasher instead.
"""

import os

import pytest

from hashkit.application.services.hasher_manager import HasherManager
from hashkit.domain.value_objects.params import Argon2idParams, BcryptParams, ScryptParams
from hashkit.infrastructure.config.settings import get_settings
from hashkit.infrastructure.security.argon2id_password_hasher import Argon2idPasswordHasher
from hashkit.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from hashkit.infrastructure.security.scrypt_password_hasher import ScryptPasswordHasher
from tests.fakes.password_hasher_fake import FakePasswordHasher

FAST_ARGON2 = Argon2idParams(memory_kib=1024, iterations=1, parallelism=1)
FAST_SCRYPT = ScryptParams(n=1024, r=8, p=1)
FAST_BCRYPT = BcryptParams(cost=4)


@pytest.fixture
def argon2id_hasher() -> Argon2idPasswordHasher:
    return Argon2idPasswordHasher(FAST_ARGON2)


@pytest.fixture
def scrypt_hasher() -> ScryptPasswordHasher:
    return ScryptPasswordHasher(FAST_SCRYPT)


@pytest.fixture
def bcrypt_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(FAST_BCRYPT)


@pytest.fixture(params=["argon2id", "bcrypt", "scrypt"])
def any_hasher(request, argon2id_hasher, bcrypt_hasher, scrypt_hasher):
    """Each real provider in turn."""
    return {
        "argon2id": argon2id_hasher,
        "bcrypt": bcrypt_hasher,
        "scrypt": scrypt_hasher,
    }[request.param]


@pytest.fixture
def manager(argon2id_hasher, bcrypt_hasher, scrypt_hasher) -> HasherManager:
    """
    Provide a manager with all three real providers (argon2id default).
    """
    return HasherManager("argon2id", [argon2id_hasher, bcrypt_hasher, scrypt_hasher])


@pytest.fixture
def fake_argon2id() -> FakePasswordHasher:
    return FakePasswordHasher("argon2id")


@pytest.fixture
def fake_bcrypt() -> FakePasswordHasher:
    return FakePasswordHasher("bcrypt", prefixes=("$2a$", "$2b$", "$2y$"))


@pytest.fixture
def fake_manager(fake_argon2id, fake_bcrypt) -> HasherManager:
    """
    Provide a manager backed by fake providers.

    Hashing is string formatting, so selection tests can draw thousands of
    times.
    """
    return HasherManager("argon2id", [fake_argon2id, fake_bcrypt])


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch, tmp_path):
    """Isolate tests from the host environment, any .env file and the settings cache."""
    for name in list(os.environ):
        if name.upper().startswith("HASHKIT_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

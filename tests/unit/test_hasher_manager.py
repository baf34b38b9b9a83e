"""Unit tests for HasherManager.

Registry, dispatch and upgrade logic are exercised with fake providers; a
few detection tests use the real (cheap) providers to check native bcrypt
strings and malformed PHC strings.
"""

import logging

import pytest

from hashkit.application.exceptions import (
    DuplicateProviderIDError,
    EmptyCandidatePoolError,
    InvalidProviderError,
    NoProvidersConfiguredError,
    UnknownDefaultProviderError,
    UnknownFormatError,
    UnknownProviderError,
)
from hashkit.application.services.hasher_manager import HasherManager, extract_tag
from hashkit.application.services.selection import DefaultSelection, WeightedSelection
from hashkit.domain.exceptions import InvalidConfigurationError, MalformedEncodingError
from hashkit.domain.value_objects import WeightedChoice
from tests.fakes.password_hasher_fake import (
    FakePasswordHasher,
    FixedSelection,
    ScriptedRandomSource,
)

pytestmark = pytest.mark.unit


class TestHasherManagerConstruction:
    """Test cases for building the registry."""

    def test_rejects_empty_provider_list(self):
        with pytest.raises(NoProvidersConfiguredError) as exc_info:
            HasherManager("argon2id", [])

        assert exc_info.value.error_code == "NO_PROVIDERS_CONFIGURED"

    def test_rejects_blank_identifier(self):
        with pytest.raises(InvalidProviderError):
            HasherManager("a", [FakePasswordHasher("a"), FakePasswordHasher("  ")])

    def test_rejects_none_provider(self):
        with pytest.raises(InvalidProviderError):
            HasherManager("a", [FakePasswordHasher("a"), None])

    def test_rejects_duplicate_identifiers(self):
        # Arrange
        providers = [FakePasswordHasher("x"), FakePasswordHasher("x")]

        # Act & Assert
        with pytest.raises(DuplicateProviderIDError) as exc_info:
            HasherManager("x", providers)

        assert "x" in str(exc_info.value)
        assert exc_info.value.error_code == "DUPLICATE_PROVIDER_ID"

    def test_rejects_duplicates_case_insensitively(self):
        with pytest.raises(DuplicateProviderIDError):
            HasherManager("x", [FakePasswordHasher("X"), FakePasswordHasher("x")])

    def test_rejects_unregistered_default(self):
        with pytest.raises(UnknownDefaultProviderError):
            HasherManager("scrypt", [FakePasswordHasher("argon2id")])

    def test_construction_errors_are_configuration_errors(self):
        with pytest.raises(InvalidConfigurationError):
            HasherManager("a", [])

    def test_identifiers_are_canonicalized(self):
        manager = HasherManager("ARGON2ID", [FakePasswordHasher("Argon2id"), FakePasswordHasher("BCRYPT")])

        assert manager.default_identifier == "argon2id"
        assert manager.identifiers == ("argon2id", "bcrypt")

    def test_logs_registered_providers(self, caplog):
        with caplog.at_level(logging.INFO, logger="hashkit"):
            HasherManager("a", [FakePasswordHasher("a")])

        assert "['a']" in caplog.text


class TestHasherManagerHash:
    """Test cases for hashing through the manager."""

    def test_hash_uses_default_provider(self, fake_manager, fake_argon2id, fake_bcrypt):
        result = fake_manager.hash("pw")

        assert result == "$argon2id$v=1$pw"
        assert fake_argon2id.hash_calls == 1
        assert fake_bcrypt.hash_calls == 0

    def test_hash_with_named_provider(self, fake_manager, fake_bcrypt):
        result = fake_manager.hash_with("BCRYPT", "pw")

        assert result == "$bcrypt$v=1$pw"
        assert fake_bcrypt.hash_calls == 1

    def test_hash_with_unknown_provider(self, fake_manager):
        with pytest.raises(UnknownProviderError) as exc_info:
            fake_manager.hash_with("md5", "pw")

        assert exc_info.value.error_code == "UNKNOWN_PROVIDER"

    def test_get_provider(self, fake_manager, fake_bcrypt):
        assert fake_manager.get_provider("Bcrypt") is fake_bcrypt

    def test_hash_using_strategy(self, fake_manager):
        result = fake_manager.hash_using("pw", DefaultSelection("bcrypt"))

        assert result.provider_id == "bcrypt"
        assert result.encoded == "$bcrypt$v=1$pw"

    def test_hash_using_canonicalizes_custom_strategy_choice(self, fake_manager, fake_bcrypt):
        result = fake_manager.hash_using("pw", FixedSelection("BCrypt"))

        assert result.provider_id == "bcrypt"
        assert result.encoded == "$bcrypt$v=1$pw"
        assert fake_bcrypt.hash_calls == 1

    def test_hash_using_custom_strategy_with_unregistered_choice(self, fake_manager):
        with pytest.raises(UnknownProviderError):
            fake_manager.hash_using("pw", FixedSelection("md5"))

    def test_hash_using_weighted_strategy_with_scripted_draw(self, fake_manager):
        draws = ScriptedRandomSource([95])
        strategy = WeightedSelection(
            [WeightedChoice("argon2id", 90), WeightedChoice("bcrypt", 10)], random_below=draws
        )

        result = fake_manager.hash_using("pw", strategy)

        assert result.provider_id == "bcrypt"
        assert draws.bounds == [100]

    def test_hash_random_restricted_to_candidates(self, fake_manager):
        for _ in range(20):
            result = fake_manager.hash_random("pw", ["bcrypt", "md5"])

            assert result.provider_id == "bcrypt"

    def test_hash_random_without_candidates_uses_all(self, fake_manager):
        chosen = {fake_manager.hash_random("pw").provider_id for _ in range(200)}

        assert chosen == {"argon2id", "bcrypt"}

    def test_hash_random_with_only_unregistered_candidates(self, fake_manager):
        with pytest.raises(EmptyCandidatePoolError):
            fake_manager.hash_random("pw", ["md5", "sha1"])

    def test_hash_weighted_empty_pool(self, fake_manager):
        with pytest.raises(EmptyCandidatePoolError) as exc_info:
            fake_manager.hash_weighted("pw", [WeightedChoice("argon2id", 0), WeightedChoice("md5", 5)])

        assert exc_info.value.error_code == "EMPTY_CANDIDATE_POOL"

    def test_hash_weighted_converges(self, fake_manager):
        # Arrange
        choices = [WeightedChoice("argon2id", 90), WeightedChoice("bcrypt", 10)]
        trials = 20_000

        # Act
        picked = [fake_manager.hash_weighted("pw", choices).provider_id for _ in range(trials)]

        # Assert
        fraction = picked.count("argon2id") / trials
        assert abs(fraction - 0.9) <= 0.02


class TestHasherManagerVerify:
    """Test cases for format detection and verification."""

    def test_verify_detects_by_tag(self, fake_manager, fake_argon2id, fake_bcrypt):
        assert fake_manager.verify("pw", "$bcrypt$v=1$pw") is True
        assert fake_bcrypt.verify_calls == 1
        assert fake_argon2id.verify_calls == 0

    def test_verify_wrong_password_is_false(self, fake_manager):
        assert fake_manager.verify("wrong", "$argon2id$v=1$pw") is False

    def test_verify_tag_is_case_insensitive(self, fake_manager, fake_argon2id):
        with pytest.raises(MalformedEncodingError):
            fake_manager.verify("pw", "$ARGON2ID$v=1$pw")

        assert fake_argon2id.verify_calls == 1

    def test_verify_falls_back_to_identify(self, fake_manager, fake_bcrypt):
        assert fake_manager.verify("pw", "$2b$v=1$pw") is True
        assert fake_bcrypt.verify_calls == 1

    @pytest.mark.parametrize("encoded", ["not-a-real-hash", "", "$md5$abc", "$pbkdf2-sha256$1$a$b"])
    def test_verify_unknown_format(self, fake_manager, encoded):
        with pytest.raises(UnknownFormatError) as exc_info:
            fake_manager.verify("pw", encoded)

        assert exc_info.value.error_code == "UNKNOWN_FORMAT"

    def test_unknown_format_is_logged_without_secret(self, fake_manager, caplog):
        with caplog.at_level(logging.WARNING, logger="hashkit"):
            with pytest.raises(UnknownFormatError):
                fake_manager.verify("hunter2", "$md5$hunter2hash")

        assert "md5" in caplog.text
        assert "hunter2" not in caplog.text

    def test_verify_native_bcrypt_with_real_providers(self, manager, bcrypt_hasher):
        hashed = bcrypt_hasher.hash("pw")

        assert manager.verify("pw", hashed) is True
        assert manager.verify("nope", hashed) is False

    def test_verify_corrupted_parameters_surface_as_malformed(self, manager):
        with pytest.raises(MalformedEncodingError):
            manager.verify("pw", "$argon2id$v=19$m=lots,t=1,p=1$AAECAwQFBgcICQoLDA0ODw$-__7_w")

    def test_verify_every_registered_format(self, manager):
        for identifier in manager.identifiers:
            hashed = manager.hash_with(identifier, "pw")

            assert manager.verify("pw", hashed) is True, identifier
            assert manager.verify("px", hashed) is False, identifier


class TestHasherManagerRehash:
    """Test cases for rehash detection and the upgrade workflow."""

    def test_needs_rehash_false_for_current_default(self, fake_manager):
        assert fake_manager.needs_rehash("$argon2id$v=1$pw") is False

    def test_needs_rehash_for_non_default_provider(self, fake_manager):
        assert fake_manager.needs_rehash("$bcrypt$v=1$pw") is True

    def test_needs_rehash_for_outdated_parameters(self):
        manager = HasherManager("argon2id", [FakePasswordHasher("argon2id", version=2)])

        assert manager.needs_rehash("$argon2id$v=1$pw") is True

    def test_needs_rehash_for_unknown_format(self, fake_manager):
        assert fake_manager.needs_rehash("garbage") is True

    def test_upgrade_wrong_password(self, fake_manager, fake_argon2id):
        result = fake_manager.verify_and_upgrade("wrong", "$bcrypt$v=1$pw")

        assert result.verified is False
        assert result.upgraded is False
        assert result.new_encoded is None
        assert fake_argon2id.hash_calls == 0

    def test_upgrade_not_needed(self, fake_manager):
        result = fake_manager.verify_and_upgrade("pw", "$argon2id$v=1$pw")

        assert result.verified is True
        assert result.upgraded is False
        assert result.new_encoded is None

    def test_upgrade_from_non_default_provider(self, fake_manager):
        # Act
        result = fake_manager.verify_and_upgrade("pw", "$bcrypt$v=1$pw")

        # Assert
        assert result.verified is True
        assert result.upgraded is True
        assert result.new_encoded == "$argon2id$v=1$pw"

    def test_upgrade_from_outdated_parameters(self):
        manager = HasherManager("argon2id", [FakePasswordHasher("argon2id", version=2)])

        result = manager.verify_and_upgrade("pw", "$argon2id$v=1$pw")

        assert result.upgraded is True
        assert result.new_encoded == "$argon2id$v=2$pw"

    def test_upgrade_propagates_unknown_format(self, fake_manager):
        with pytest.raises(UnknownFormatError):
            fake_manager.verify_and_upgrade("pw", "garbage")

    def test_upgrade_is_logged(self, fake_manager, caplog):
        with caplog.at_level(logging.INFO, logger="hashkit"):
            fake_manager.verify_and_upgrade("pw", "$bcrypt$v=1$pw")

        assert "'bcrypt' to 'argon2id'" in caplog.text


class TestExtractTag:
    @pytest.mark.parametrize(
        "encoded, expected",
        [
            ("$argon2id$v=19$m=1", "argon2id"),
            ("$SCRYPT$N=2", "scrypt"),
            ("$2b$12$abc", "2b"),
            ("argon2id$v=19", ""),
            ("$$", ""),
            ("", ""),
        ],
    )
    def test_extract_tag(self, encoded, expected):
        assert extract_tag(encoded) == expected

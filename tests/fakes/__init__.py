"""Fake implementations for testing."""

from tests.fakes.password_hasher_fake import FakePasswordHasher, FixedSelection, ScriptedRandomSource

__all__ = ["FakePasswordHasher", "FixedSelection", "ScriptedRandomSource"]

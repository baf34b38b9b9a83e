"""Domain services - abstractions implemented by the infrastructure layer."""

from hashkit.domain.services.password_hasher import IPasswordHasher, Password

__all__ = ["IPasswordHasher", "Password"]

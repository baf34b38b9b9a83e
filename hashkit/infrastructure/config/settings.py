"""Hasher settings using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KNOWN_PROVIDERS = ("argon2id", "bcrypt", "scrypt")


class Settings(BaseSettings):
    """Hashing configuration - single source of truth.

    All settings loaded from ``HASHKIT_``-prefixed environment variables or
    a .env file.

    Usage:
        settings = get_settings()
        print(settings.default_provider)
        print(settings.enabled_providers_list)
    """

    # Providers
    default_provider: str = Field(default="argon2id")
    enabled_providers: str = Field(
        default="argon2id,bcrypt",
        description="Comma-separated provider identifiers to register. "
        "Hashes from providers not listed here cannot be verified.",
    )

    # Argon2id
    argon2_memory_kib: int = Field(default=64 * 1024)
    argon2_iterations: int = Field(default=3)
    argon2_parallelism: int = Field(default=2)
    argon2_salt_length: int = Field(default=16)
    argon2_key_length: int = Field(default=32)

    # Bcrypt
    bcrypt_cost: int = Field(default=12)

    # Scrypt
    scrypt_n: int = Field(default=1 << 15)
    scrypt_r: int = Field(default=8)
    scrypt_p: int = Field(default=1)
    scrypt_salt_length: int = Field(default=16)
    scrypt_key_length: int = Field(default=32)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="HASHKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("default_provider")
    @classmethod
    def validate_default_provider(cls, v: str) -> str:
        """Ensure the default provider is a known algorithm."""
        v = v.strip().lower()
        if v not in KNOWN_PROVIDERS:
            raise ValueError(
                f"DEFAULT_PROVIDER must be one of {', '.join(KNOWN_PROVIDERS)}, got '{v}'"
            )
        return v

    @field_validator("enabled_providers")
    @classmethod
    def validate_enabled_providers(cls, v: str) -> str:
        """Ensure every enabled provider is a known algorithm."""
        names = [name.strip().lower() for name in v.split(",") if name.strip()]
        if not names:
            raise ValueError("ENABLED_PROVIDERS must list at least one provider")
        unknown = [name for name in names if name not in KNOWN_PROVIDERS]
        if unknown:
            raise ValueError(f"Unknown providers in ENABLED_PROVIDERS: {', '.join(unknown)}")
        return ",".join(names)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got '{v}'")
        return v

    @model_validator(mode="after")
    def validate_default_is_enabled(self) -> "Settings":
        """The default provider has to be registered to hash new passwords."""
        if self.default_provider not in self.enabled_providers_list:
            raise ValueError(
                f"DEFAULT_PROVIDER '{self.default_provider}' must be listed in ENABLED_PROVIDERS"
            )
        return self

    @property
    def enabled_providers_list(self) -> list[str]:
        """Parse comma-separated enabled providers into a list."""
        return [name for name in self.enabled_providers.split(",") if name]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the process lifetime.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()

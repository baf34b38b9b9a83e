"""Application layer exceptions."""

from hashkit.domain.exceptions import InvalidConfigurationError


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class UnknownProviderError(ApplicationError):
    """Raised when a caller names a provider that is not registered."""

    def __init__(self, message: str = "Provider not registered"):
        super().__init__(message, error_code="UNKNOWN_PROVIDER")


class EmptyCandidatePoolError(ApplicationError):
    """Raised when provider selection is left with no valid candidate."""

    def __init__(self, message: str = "No valid providers to choose from"):
        super().__init__(message, error_code="EMPTY_CANDIDATE_POOL")


class UnknownFormatError(ApplicationError):
    """Raised when an encoded hash cannot be attributed to any registered provider."""

    def __init__(self, message: str = "Unknown hash format"):
        super().__init__(message, error_code="UNKNOWN_FORMAT")


# Registry construction failures. They are fatal to startup and share the
# domain's InvalidConfigurationError base with invalid parameter sets.


class NoProvidersConfiguredError(InvalidConfigurationError):
    """Raised when a manager is built without any provider."""

    def __init__(self, message: str = "At least one provider is required"):
        super().__init__(message, error_code="NO_PROVIDERS_CONFIGURED")


class InvalidProviderError(InvalidConfigurationError):
    """Raised when a provider is missing or has a blank identifier."""

    def __init__(self, message: str = "Invalid provider"):
        super().__init__(message, error_code="INVALID_PROVIDER")


class DuplicateProviderIDError(InvalidConfigurationError):
    """Raised when two providers share an identifier (case-insensitively)."""

    def __init__(self, message: str = "Duplicate provider identifier"):
        super().__init__(message, error_code="DUPLICATE_PROVIDER_ID")


class UnknownDefaultProviderError(InvalidConfigurationError):
    """Raised when the default identifier does not name a supplied provider."""

    def __init__(self, message: str = "Default provider not registered"):
        super().__init__(message, error_code="UNKNOWN_DEFAULT_PROVIDER")

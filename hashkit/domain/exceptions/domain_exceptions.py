"""Domain layer exceptions for provider and parameter rule violations."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions are raised when a provider cannot honour its contract:
    its parameters are invalid, an encoded hash does not follow its format,
    or one of the primitives it consumes failed.

    A wrong password is NOT a domain exception. ``verify`` returns False for
    that case.
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidConfigurationError(DomainException):
    """Raised when hashing parameters or a provider registry are invalid."""

    def __init__(self, message: str, error_code: str = "INVALID_CONFIGURATION"):
        super().__init__(message, error_code=error_code)


class MalformedEncodingError(DomainException):
    """Raised when an encoded hash does not match the provider's exact format."""

    def __init__(self, message: str = "Malformed encoded hash"):
        super().__init__(message, error_code="MALFORMED_ENCODING")


class EntropyFailureError(DomainException):
    """Raised when the operating system's secure random source fails."""

    def __init__(self, message: str = "Secure random source unavailable"):
        super().__init__(message, error_code="ENTROPY_FAILURE")


class DerivationError(DomainException):
    """Raised when a key-derivation primitive fails to produce a digest."""

    def __init__(self, message: str = "Key derivation failed"):
        super().__init__(message, error_code="DERIVATION_FAILED")

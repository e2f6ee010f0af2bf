"""Error hierarchy for smog.

Error layers:
- SmogError: Base class for all smog errors
- DomainError: Business rule violations, validation failures (4xx responses)
- InfrastructureError: System-level failures like upstream/network issues (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
Failures in enrichment paths (descriptions, partial pagination) are absorbed by the
adapters themselves and never surface as errors.
"""


class SmogError(Exception):
    """Base class for all smog errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(SmogError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(SmogError):
    """Base class for infrastructure/system errors."""


class ExternalServiceError(InfrastructureError):
    """External service (pollution API, encyclopedia) is unavailable or failed."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""

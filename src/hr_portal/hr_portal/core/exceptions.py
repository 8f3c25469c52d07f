class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a required field is missing or input is invalid."""


class ConflictError(DomainError):
    """Raised when an email is already taken."""


class ReferenceNotFoundError(DomainError):
    """Raised when an entity points at an account that does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class PolicyError(DomainError):
    """Raised when an action is forbidden for the current session."""


class NotSupportedError(DomainError):
    """Raised by operations that are declared but not available."""

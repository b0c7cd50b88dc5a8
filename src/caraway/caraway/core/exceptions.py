class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced family or user does not exist."""


class UnregisteredPartyError(DomainError):
    """Raised when a booking owner has no pre-registered history series."""

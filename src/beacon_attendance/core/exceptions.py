class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class ConflictError(DomainError):
    """Raised when the session state does not allow the requested transition."""


class SessionNotOpenError(DomainError):
    """Raised when a check-in arrives while no session is open."""


class DuplicateCheckInError(DomainError):
    """Raised when a student already has a check-in for the session."""

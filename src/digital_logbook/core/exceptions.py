class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvalidCredentials(AuthenticationError):
    """Login failed. Unknown user and wrong password are not distinguished."""

    def __init__(self, message: str = "invalid credentials"):
        super().__init__(message)


class UserNotFound(DomainError):
    """Raised when a lookup by user id finds nothing."""

    def __init__(self, message: str = "user not found"):
        super().__init__(message)


class DatabaseUnavailable(DomainError):
    """No database connection (startup failure or mock mode)."""

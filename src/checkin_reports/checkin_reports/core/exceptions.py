class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request input is missing or malformed."""


class AuthenticationError(DomainError):
    """Raised when credentials or tokens are not recognized."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

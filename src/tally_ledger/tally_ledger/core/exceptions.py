class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials or a bearer token are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InvalidPeriod(ValidationError):
    """Raised when a report period is not daily, weekly or monthly."""


class InvalidRange(ValidationError):
    """Raised when a date range ends before it starts."""


class AlreadyOpenShift(ValidationError):
    """Raised on clock-in when the recorder already has an open shift."""


class NoOpenShift(ValidationError):
    """Raised on clock-out when the recorder has no open shift."""

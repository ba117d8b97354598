class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "DomainError"


class ValidationError(DomainError):
    """Raised when input data is malformed."""

    code = "ValidationError"


class InvalidIdentity(ValidationError):
    """Raised when a caller or target identity is malformed."""

    code = "InvalidIdentity"


class InvalidName(ValidationError):
    """Raised when a display name is empty after trimming."""

    code = "InvalidName"


class InvalidTimestamp(ValidationError):
    """Raised when a timestamp is not a finite number of seconds."""

    code = "InvalidTimestamp"


class AlreadyRegistered(DomainError):
    """Raised when the identity already holds an active registration."""

    code = "AlreadyRegistered"


class NotRegistered(DomainError):
    """Raised when the identity has no active registration."""

    code = "NotRegistered"


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""

    code = "AuthorizationError"


class NotAuthorized(AuthorizationError):
    """Raised when a non-administrator calls an administrative operation."""

    code = "NotAuthorized"

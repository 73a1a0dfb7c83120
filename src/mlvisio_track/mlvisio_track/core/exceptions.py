class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or a required field is missing."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when a natural key (e.g. email) is already taken."""

    status_code = 409


class UpstreamError(DomainError):
    """Raised when a third-party service (image host) fails."""

    status_code = 500

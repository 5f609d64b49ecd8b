"""Error types raised by services and mapped to HTTP responses."""


class DailyDietError(Exception):
    """Base class for errors surfaced to API clients."""

    http_status = 400

    def __init__(self, message: str = "Bad request") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingSessionError(DailyDietError):
    """Raised when a guarded request carries no session token."""

    http_status = 401

    def __init__(self, message: str = "Missing session") -> None:
        super().__init__(message)


class ForbiddenError(DailyDietError):
    """Raised when the session does not own the requested resource."""

    http_status = 403

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class NotFoundError(DailyDietError):
    """Raised when a requested resource does not exist."""

    http_status = 404

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)

"""Error taxonomy for the users API and its HTTP status mapping."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PERSISTENCE: 500,
}


class ConfigurationError(Exception):
    """Raised when a required environment variable is missing."""


class DatabaseConnectionError(Exception):
    """Raised when MongoDB cannot be reached or the URI is invalid."""


class UserServiceError(Exception):
    """Base class for per-request failures; carries the kind used for the HTTP status."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class ValidationError(UserServiceError):
    kind = ErrorKind.VALIDATION

    def __init__(self, errors: dict[str, str]):
        super().__init__("Validation failed")
        self.errors = dict(errors)


class BadRequestError(UserServiceError):
    kind = ErrorKind.BAD_REQUEST


class NotFoundError(UserServiceError):
    kind = ErrorKind.NOT_FOUND


class PersistenceError(UserServiceError):
    kind = ErrorKind.PERSISTENCE

"""
Base domain exceptions.

Every exception carries an ErrorKind classification. Callers branch on
the kind (and the presentation layer maps it to an HTTP status); the
message is for humans only.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed classification of domain failures."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION = "VALIDATION"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    UPSTREAM = "UPSTREAM"
    INTERNAL = "INTERNAL"


class TalardnadException(Exception):
    """Base exception for all Talardnad domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        code: str | None = None,
        kind: ErrorKind | None = None,
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        if kind is not None:
            self.kind = kind
        super().__init__(self.message)


class EntityNotFoundError(TalardnadException):
    """Raised when entity is not found in repository."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        message = f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class DuplicateEntityError(TalardnadException):
    """Raised when attempting to create duplicate entity."""

    kind = ErrorKind.CONFLICT

    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        message = f"{entity_type} with {identifier} already exists"
        super().__init__(message, code="DUPLICATE_ENTITY")


class ValidationError(TalardnadException):
    """Raised when entity validation fails."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, reason: str):
        self.field = field
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")


class InternalError(TalardnadException):
    """Raised when a dependency fails in a way the caller cannot act on."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        super().__init__(message, code=code)


class RepositoryError(TalardnadException):
    """Raised by repositories for storage failures other than not-found."""

    kind = ErrorKind.INTERNAL

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        message = f"Database {operation} failed: {reason}"
        super().__init__(message, code="REPOSITORY_ERROR")


def is_not_found(exc: BaseException) -> bool:
    """Tell whether an exception is classified NOT_FOUND."""
    return getattr(exc, "kind", None) == ErrorKind.NOT_FOUND

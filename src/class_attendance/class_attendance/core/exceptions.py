class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateError(DomainError):
    """Raised when a student with the same name already exists."""


class ConstraintError(DomainError):
    """Raised when the store rejects a write (uniqueness or foreign key)."""


class StorageInitError(DomainError):
    """Raised when the database file cannot be opened or the schema created."""


class ExportError(DomainError):
    """Raised when writing an attendance report fails."""

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class RecordNotFoundError(DomainError):
    """Raised when a record id (or positional index) does not exist in the store."""


class NoRecordsToExportError(ValidationError):
    """Raised when the selected export period has no records."""

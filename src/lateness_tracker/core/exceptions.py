class DomainError(Exception):
    """Base exception for business rule violations."""


class PersistenceError(DomainError):
    """Raised when the database rejects or fails an operation."""


class CredentialCorruptionError(DomainError):
    """Raised when a stored password digest cannot be parsed."""

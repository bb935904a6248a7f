"""Domain-level exceptions.

User stores raise these errors to express persistence rule violations.
Services let them propagate unchanged to the caller.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""

"""Domain-level exceptions.

Every business failure raised by the entity, the repository port or the
service is a subclass of DomainException so the HTTP layer can map them
to status codes in one place.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A product field constraint was violated."""


class NotFound(DomainException):
    """The referenced product does not exist."""


class InvalidArgument(DomainException):
    """A precondition of an operation was not met (programmer error)."""


class OperationFailed(DomainException):
    """A persistence operation that should have affected a row affected none."""


class ConcurrentModification(OperationFailed):
    """The stored product changed after the caller fetched it."""

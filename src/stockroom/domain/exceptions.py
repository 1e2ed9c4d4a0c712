"""Domain-level exceptions.

Every rule violation is a subclass of DomainException so the CLI layer can
catch them uniformly and turn them into user-facing messages. None of them
are retried; they all describe bad caller input.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A request argument or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EntityAlreadyExistsError(DomainException):
    """An entity with the same natural key is already stored."""

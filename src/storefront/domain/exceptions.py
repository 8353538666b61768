"""Domain-level exceptions.

The catalog filter and the cart engine never raise for documented input.
These exceptions cover invalid value objects, use-case lookups and the
catalog data source, so the CLI layer can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all storefront errors."""


class ValidationError(DomainException):
    """A value object or record invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CatalogUnavailableError(DomainException):
    """The catalog data source could not be read."""

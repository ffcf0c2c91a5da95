"""
Exceptions raised by the catalog.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class InvalidParameter(CatalogError):
    """Raised when a body, orbit or query is given physically invalid inputs."""


class UnsupportedOperation(CatalogError):
    """Raised when a query is not defined for the body it is asked of."""

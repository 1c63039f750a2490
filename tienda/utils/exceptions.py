class TiendaError(Exception):
    """Base exception for the project."""

class DataLoadError(TiendaError):
    """Raised when the catalog file or one of its records cannot be loaded."""

class UnknownProductTypeError(DataLoadError):
    """Raised when a catalog record carries a type tag with no product variant."""

"""
Exceptions raised by the mapping layer.

Declaration and shape errors are programming defects and propagate to the
caller. Store driver errors are never wrapped.
"""


class MapperError(Exception):
    """Base class for all mapper errors."""


class ConfigurationError(MapperError):
    """Raised when a document class is missing required configuration."""


class NotMappedError(MapperError):
    """Raised when a class lacks document or embedded document metadata."""


class NotADocumentError(NotMappedError):
    """Raised when a value passed to the serializer is not a mapped document."""


class DuplicateClientError(MapperError):
    """Raised when registering a client name twice."""


class UnknownClientError(MapperError, KeyError):
    """Raised when looking up a client name that was never registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument
        return str(self.args[0]) if self.args else ""


class InvalidReferenceError(MapperError):
    """Raised when a document is embedded inside another document."""


class TypeMismatchError(MapperError, TypeError):
    """Raised when an embed field holds a value of the wrong shape."""


class InvalidArgumentError(MapperError, ValueError):
    """Raised for an unrecognised embed representation."""


class InvalidIdentifierError(MapperError, ValueError):
    """Raised when a value cannot be used as an ObjectId."""

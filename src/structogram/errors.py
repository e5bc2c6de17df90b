"""
Exception hierarchy for structogram editing.

Pure queries return None when a mapping addresses nothing. Everything
below is raised by operations whose preconditions were violated.
"""


class StructogramError(Exception):
    """Base class for all structogram errors."""
    pass


class NotFoundError(StructogramError, LookupError):
    """Raised when a mapping does not address an existing statement."""
    pass


class InvalidMappingError(StructogramError, ValueError):
    """Raised when a mapping is empty or otherwise unusable."""
    pass


class UnsupportedContainerError(StructogramError, TypeError):
    """Raised when a mapping's parent cannot hold addressable children directly."""
    pass


class InvalidConversionError(StructogramError, TypeError):
    """Raised when no conversion is defined between two statement kinds."""
    pass


class TypeMismatchError(StructogramError, TypeError):
    """Raised when a statement was expected but a statement list was addressed."""
    pass


class StructogramParseError(StructogramError, ValueError):
    """Raised when serialized input does not have the expected shape."""
    pass

class ColorError(ValueError):
    """Base class for request-scoped color errors."""


class FormatError(ColorError):
    """A color representation is malformed or out of range."""


class ValidationError(ColorError):
    """A palette request is well-formed but cannot be fulfilled."""

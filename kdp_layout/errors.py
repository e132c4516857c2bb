"""Exceptions raised by the layout engine."""


class LayoutError(Exception):
    """Base class for layout engine errors."""


class ConfigurationError(LayoutError):
    """An unknown or unsupported option, e.g. a trim size or paper type."""


class ValidationError(LayoutError, ValueError):
    """A numeric setting is out of its supported range."""

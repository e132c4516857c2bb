"""Book layout engine for Amazon KDP print interiors."""

from kdp_layout.errors import ConfigurationError, LayoutError, ValidationError
from kdp_layout.layout.engine import LayoutEngine

__all__ = [
    "ConfigurationError",
    "LayoutEngine",
    "LayoutError",
    "ValidationError",
]

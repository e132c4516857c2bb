"""Re-validation of formatting settings before layout."""

import math

from kdp_layout.errors import ConfigurationError, ValidationError
from kdp_layout.layout.dimensions import MIN_MARGIN_INCHES, TRIM_SIZES
from kdp_layout.models.settings import FONT_FAMILIES, FormattingSettings

FONT_SIZE_RANGE = (8, 16)
LINE_SPACING_RANGE = (1.0, 2.0)


def validate_settings(settings: FormattingSettings) -> None:
    """Check settings against supported options and ranges.

    Values are never clamped. Unknown options are reported before range
    problems; every problem of the failing kind is listed in the message.

    Raises:
        ConfigurationError: Unknown trim size, or font family.
        ValidationError: A margin, font size or line spacing out of range.
    """
    unknown: list[str] = []
    if settings.trim_size not in TRIM_SIZES:
        unknown.append(f"trim size '{settings.trim_size}'")
    if settings.font_family not in FONT_FAMILIES:
        unknown.append(f"font family '{settings.font_family}'")
    if unknown:
        raise ConfigurationError(f"Unsupported {', '.join(unknown)}")

    problems: list[str] = []
    margins = {
        "margin_top": settings.margin_top,
        "margin_bottom": settings.margin_bottom,
        "margin_inside": settings.margin_inside,
        "margin_outside": settings.margin_outside,
    }
    numbers = {**margins, "font_size": settings.font_size, "line_spacing": settings.line_spacing}
    for name, value in numbers.items():
        if not math.isfinite(value):
            problems.append(f"{name} must be a finite number, got {value}")
    if problems:
        raise ValidationError("; ".join(problems))

    for name, value in margins.items():
        if value < MIN_MARGIN_INCHES:
            problems.append(f"{name} {value}in is below the {MIN_MARGIN_INCHES}in minimum")

    low, high = FONT_SIZE_RANGE
    if not low <= settings.font_size <= high:
        problems.append(f"font_size {settings.font_size}pt is outside {low}-{high}pt")

    low, high = LINE_SPACING_RANGE
    if not low <= settings.line_spacing <= high:
        problems.append(f"line_spacing {settings.line_spacing} is outside {low}-{high}")

    if problems:
        raise ValidationError("; ".join(problems))

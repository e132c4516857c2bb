"""Trim-size, margin, spine and cover geometry for KDP paperbacks."""

import logging
import math

from kdp_layout.errors import ConfigurationError, ValidationError
from kdp_layout.models.dimensions import ContentArea, CoverDimensions, PageDimensions
from kdp_layout.models.settings import FormattingSettings

logger = logging.getLogger(__name__)

# Supported trim sizes mapped to (width, height) in inches
TRIM_SIZES: dict[str, tuple[float, float]] = {
    "5x8": (5.0, 8.0),
    "6x9": (6.0, 9.0),
    "7x10": (7.0, 10.0),
    "8.5x11": (8.5, 11.0),
}

# Paper thickness per page, in inches
PAPER_MULTIPLIERS: dict[str, float] = {
    "white": 0.002252,
    "cream": 0.0025,
    "color": 0.002347,
}

BLEED_INCHES = 0.125
MIN_MARGIN_INCHES = 0.25  # KDP minimum on every edge
MIN_SPINE_TEXT_WIDTH = 0.25
POINTS_PER_INCH = 72


def resolve_dimensions(trim_size: str) -> PageDimensions:
    """Map a trim-size identifier to its physical width and height.

    Raises:
        ConfigurationError: If the trim size is not supported.
    """
    if trim_size not in TRIM_SIZES:
        raise ConfigurationError(
            f"Unsupported trim size: '{trim_size}'. "
            f"Supported: {', '.join(TRIM_SIZES.keys())}"
        )
    width, height = TRIM_SIZES[trim_size]
    return PageDimensions(width_in=width, height_in=height)


def resolve_spine_width(page_count: int, paper_type: str = "white") -> float:
    """Compute spine thickness from page count and paper stock.

    No minimum is enforced; use :func:`is_spine_text_viable` to flag spines
    too thin to carry text.

    Raises:
        ValidationError: If page_count is zero or negative.
        ConfigurationError: If the paper type is unknown.
    """
    if page_count <= 0:
        raise ValidationError(f"Page count must be positive, got {page_count}")
    if paper_type not in PAPER_MULTIPLIERS:
        raise ConfigurationError(
            f"Unsupported paper type: '{paper_type}'. "
            f"Supported: {', '.join(PAPER_MULTIPLIERS.keys())}"
        )
    return page_count * PAPER_MULTIPLIERS[paper_type]


def is_spine_text_viable(spine_width: float, min_width: float = MIN_SPINE_TEXT_WIDTH) -> bool:
    """Whether a spine is wide enough for legible text."""
    return spine_width >= min_width


def inches_to_pixels(inches: float, dpi: int = 300) -> int:
    return round(inches * dpi)


def inches_to_points(inches: float) -> float:
    return inches * POINTS_PER_INCH


def resolve_cover_dimensions(
    trim_size: str,
    page_count: int,
    paper_type: str = "white",
    bleed: bool = True,
    dpi: int = 300,
    spine_text_min_width: float = MIN_SPINE_TEXT_WIDTH,
) -> CoverDimensions:
    """Compute the full-wrap cover (back, spine, front) for a paperback.

    Args:
        trim_size: Trim-size identifier, e.g. "6x9".
        page_count: Interior page count.
        paper_type: "white", "cream" or "color".
        bleed: Add 0.125in on every outer edge.
        dpi: Resolution for the pixel dimensions.
        spine_text_min_width: Narrowest spine that can carry text.

    Returns:
        CoverDimensions in inches plus pixel size at ``dpi``.
    """
    trim = resolve_dimensions(trim_size)
    spine_width = resolve_spine_width(page_count, paper_type)
    bleed_in = BLEED_INCHES if bleed else 0.0

    total_width = 2 * trim.width_in + spine_width + 2 * bleed_in
    total_height = trim.height_in + 2 * bleed_in

    viable = is_spine_text_viable(spine_width, spine_text_min_width)
    if not viable:
        logger.warning(
            "Spine too thin for text: %.3fin for %d pages on %s paper (needs %.2fin)",
            spine_width,
            page_count,
            paper_type,
            spine_text_min_width,
        )

    return CoverDimensions(
        trim_width=trim.width_in,
        trim_height=trim.height_in,
        spine_width=spine_width,
        bleed=bleed_in,
        total_width=total_width,
        total_height=total_height,
        dpi=dpi,
        pixel_width=inches_to_pixels(total_width, dpi),
        pixel_height=inches_to_pixels(total_height, dpi),
        spine_text_viable=viable,
    )


def resolve_page_size(settings: FormattingSettings) -> PageDimensions:
    """Physical interior page size, including bleed when enabled."""
    trim = resolve_dimensions(settings.trim_size)
    if not settings.bleed:
        return trim
    return PageDimensions(
        width_in=trim.width_in + 2 * BLEED_INCHES,
        height_in=trim.height_in + 2 * BLEED_INCHES,
    )


def resolve_content_area(settings: FormattingSettings) -> ContentArea:
    """Text block left inside the margins of the trimmed page.

    Raises:
        ConfigurationError: If the trim size is not supported.
        ValidationError: If a margin exceeds half its page dimension or the
            margins leave no room for text.
    """
    trim = resolve_dimensions(settings.trim_size)

    axes = (
        ("margin_top", settings.margin_top, trim.height_in),
        ("margin_bottom", settings.margin_bottom, trim.height_in),
        ("margin_inside", settings.margin_inside, trim.width_in),
        ("margin_outside", settings.margin_outside, trim.width_in),
    )
    for name, margin, dimension in axes:
        if not math.isfinite(margin):
            raise ValidationError(f"{name} must be a finite number, got {margin}")
        if margin > dimension / 2:
            raise ValidationError(
                f"{name} of {margin}in exceeds half the page dimension ({dimension}in)"
            )

    width = trim.width_in - settings.margin_inside - settings.margin_outside
    height = trim.height_in - settings.margin_top - settings.margin_bottom
    if width <= 0 or height <= 0:
        raise ValidationError(
            f"Margins leave no content area on a {settings.trim_size} page "
            f"({width:.3f}in x {height:.3f}in)"
        )

    return ContentArea(
        width_in=width,
        height_in=height,
        margin_top=settings.margin_top,
        margin_bottom=settings.margin_bottom,
        margin_inside=settings.margin_inside,
        margin_outside=settings.margin_outside,
    )

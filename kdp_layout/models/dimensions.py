"""Physical geometry models (all lengths in inches)."""

from pydantic import BaseModel, ConfigDict


class PageDimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    width_in: float
    height_in: float


class ContentArea(BaseModel):
    """Text block left inside the margins of a trimmed page."""

    model_config = ConfigDict(frozen=True)

    width_in: float
    height_in: float
    margin_top: float
    margin_bottom: float
    margin_inside: float
    margin_outside: float


class CoverDimensions(BaseModel):
    """Full-wrap paperback cover: back + spine + front, plus bleed."""

    model_config = ConfigDict(frozen=True)

    trim_width: float
    trim_height: float
    spine_width: float
    bleed: float
    total_width: float
    total_height: float
    dpi: int
    pixel_width: int
    pixel_height: int
    spine_text_viable: bool

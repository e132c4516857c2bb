"""Data models for the KDP book layout engine."""

from kdp_layout.models.book import BookContent, BookMetadata, Chapter
from kdp_layout.models.dimensions import ContentArea, CoverDimensions, PageDimensions
from kdp_layout.models.page import (
    LayoutResult,
    PageDescriptor,
    PageKind,
    TocEntry,
    Typography,
)
from kdp_layout.models.settings import FONT_FAMILIES, FormattingSettings

__all__ = [
    "FONT_FAMILIES",
    "BookContent",
    "BookMetadata",
    "Chapter",
    "ContentArea",
    "CoverDimensions",
    "FormattingSettings",
    "LayoutResult",
    "PageDescriptor",
    "PageDimensions",
    "PageKind",
    "TocEntry",
    "Typography",
]

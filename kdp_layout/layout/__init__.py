"""Book layout: geometry, segmentation, estimation and page composition."""

from kdp_layout.layout.composer import PageComposer
from kdp_layout.layout.dimensions import (
    resolve_content_area,
    resolve_cover_dimensions,
    resolve_dimensions,
    resolve_page_size,
    resolve_spine_width,
)
from kdp_layout.layout.engine import LayoutEngine, layout
from kdp_layout.layout.estimator import estimate_chapter_page_count
from kdp_layout.layout.segmenter import escape_markup, segment_paragraphs

__all__ = [
    "LayoutEngine",
    "PageComposer",
    "escape_markup",
    "estimate_chapter_page_count",
    "layout",
    "resolve_content_area",
    "resolve_cover_dimensions",
    "resolve_dimensions",
    "resolve_page_size",
    "resolve_spine_width",
    "segment_paragraphs",
]

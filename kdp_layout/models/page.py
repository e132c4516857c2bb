"""Layout output models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from kdp_layout.models.dimensions import ContentArea, PageDimensions


class PageKind(str, Enum):
    TITLE = "title"
    TOC = "toc"
    CHAPTER = "chapter"


class TocEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    estimated_page_number: int
    chapter_index: int | None = None  # Matches the chapter page label; None when no page


class Typography(BaseModel):
    """Rendering parameters carried by every page. They do not affect pagination."""

    model_config = ConfigDict(frozen=True)

    font_family: str
    font_size: float
    line_spacing: float
    include_page_numbers: bool


class PageDescriptor(BaseModel):
    """One renderable page.

    Which optional fields are filled depends on ``kind``: title pages carry
    the book title and metadata, TOC pages carry ``toc_entries``, chapter
    pages carry the chapter fields and ``paragraphs``. Paragraph text is
    stored unescaped; escaping happens in the renderer.
    """

    model_config = ConfigDict(frozen=True)

    kind: PageKind
    page_number: int
    typography: Typography

    # Title page
    title: str | None = None
    author: str | None = None
    publisher: str | None = None
    year: str | None = None

    # Table of contents
    toc_entries: tuple[TocEntry, ...] = ()

    # Chapter page
    chapter_index: int | None = None  # 1-based over emitted chapter pages
    chapter_id: str | None = None
    chapter_title: str | None = None
    paragraphs: tuple[str, ...] = ()


class LayoutResult(BaseModel):
    """Finalized page list plus the geometry it was laid out for."""

    model_config = ConfigDict(frozen=True)

    pages: tuple[PageDescriptor, ...]
    total_pages: int
    estimated_page_count: int
    page_dimensions: PageDimensions
    content_area: ContentArea
    warnings: tuple[str, ...] = ()

"""Assembles the ordered page sequence for a book."""

import logging

from kdp_layout.config import LayoutConfig
from kdp_layout.layout.estimator import estimate_toc_page_numbers
from kdp_layout.layout.segmenter import segment_paragraphs
from kdp_layout.models.book import BookContent
from kdp_layout.models.page import PageDescriptor, PageKind, TocEntry, Typography
from kdp_layout.models.settings import FormattingSettings

logger = logging.getLogger(__name__)


class PageComposer:
    """Builds page descriptors: [title] [toc] chapter pages, in print order.

    Each non-empty chapter becomes exactly one logical page, whatever its
    length; splitting text across physical pages is left to the renderer.
    Chapters whose content segments to nothing are skipped.

    Args:
        config: LayoutConfig with words_per_page and
                toc_skips_empty_chapters settings.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self._config = config or LayoutConfig()

    def compose(self, book: BookContent, settings: FormattingSettings) -> list[PageDescriptor]:
        """Lay out a book into page descriptors.

        Never raises for a book without chapters: the result then holds
        only the enabled front-matter pages, or nothing.

        Args:
            book: The manuscript.
            settings: Formatting settings (assumed already validated).

        Returns:
            Ordered list of PageDescriptor objects.
        """
        pages, _ = self.compose_with_warnings(book, settings)
        return pages

    def compose_with_warnings(
        self, book: BookContent, settings: FormattingSettings
    ) -> tuple[list[PageDescriptor], list[str]]:
        """Like :meth:`compose`, also returning notes about skipped chapters."""
        warnings: list[str] = []
        typography = Typography(
            font_family=settings.font_family,
            font_size=settings.font_size,
            line_spacing=settings.line_spacing,
            include_page_numbers=settings.include_page_numbers,
        )
        segmented = [segment_paragraphs(chapter.content) for chapter in book.chapters]

        pages: list[PageDescriptor] = []
        page_number = 0

        if settings.include_title_page:
            page_number += 1
            pages.append(self._title_page(book, page_number, typography))

        if settings.include_toc:
            page_number += 1
            pages.append(self._toc_page(book, segmented, page_number, typography))

        chapter_index = 0
        for chapter, paragraphs in zip(book.chapters, segmented):
            if not paragraphs:
                message = f"Chapter '{chapter.title}' (id={chapter.id}) has no content; no page emitted"
                if settings.include_toc and not self._config.toc_skips_empty_chapters:
                    message += " but it is still listed in the table of contents"
                logger.warning(message)
                warnings.append(message)
                continue

            page_number += 1
            chapter_index += 1
            pages.append(
                PageDescriptor(
                    kind=PageKind.CHAPTER,
                    page_number=page_number,
                    typography=typography,
                    chapter_index=chapter_index,
                    chapter_id=chapter.id,
                    chapter_title=chapter.title,
                    paragraphs=tuple(paragraphs),
                )
            )

        return pages, warnings

    def _title_page(
        self, book: BookContent, page_number: int, typography: Typography
    ) -> PageDescriptor:
        metadata = book.metadata
        return PageDescriptor(
            kind=PageKind.TITLE,
            page_number=page_number,
            typography=typography,
            title=book.title,
            author=metadata.author or None,
            publisher=metadata.publisher or None,
            year=metadata.year or None,
        )

    def _toc_page(
        self,
        book: BookContent,
        segmented: list[list[str]],
        page_number: int,
        typography: Typography,
    ) -> PageDescriptor:
        """Build the TOC page; entry numbers start on the page after it."""
        chapters = book.chapters
        if self._config.toc_skips_empty_chapters:
            chapters = [ch for ch, paras in zip(book.chapters, segmented) if paras]

        start_pages = estimate_toc_page_numbers(
            chapters, page_number + 1, self._config.words_per_page
        )
        ordinals: dict[str, int] = {}
        for chapter, paras in zip(book.chapters, segmented):
            if paras:
                ordinals[chapter.id] = len(ordinals) + 1

        entries = tuple(
            TocEntry(
                title=chapter.title,
                estimated_page_number=start,
                chapter_index=ordinals.get(chapter.id),
            )
            for chapter, start in zip(chapters, start_pages)
        )
        return PageDescriptor(
            kind=PageKind.TOC,
            page_number=page_number,
            typography=typography,
            toc_entries=entries,
        )

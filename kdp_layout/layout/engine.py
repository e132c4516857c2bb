"""Layout engine façade: settings + manuscript in, finalized pages out."""

import logging

from kdp_layout.config import AppConfig
from kdp_layout.layout.composer import PageComposer
from kdp_layout.layout.dimensions import (
    resolve_content_area,
    resolve_cover_dimensions,
    resolve_page_size,
)
from kdp_layout.layout.estimator import estimate_book_page_count
from kdp_layout.layout.validation import validate_settings
from kdp_layout.models.book import BookContent
from kdp_layout.models.dimensions import CoverDimensions
from kdp_layout.models.page import LayoutResult
from kdp_layout.models.settings import FormattingSettings

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Pure layout pipeline.

    Validate settings, resolve geometry, compose pages. The whole result is
    rebuilt on every call; there is no cache and no state shared between
    calls, so it is safe to call on every content or settings change.

    Args:
        config: AppConfig supplying the layout heuristics and cover defaults.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()
        self._composer = PageComposer(self._config.layout)

    def layout(self, book: BookContent, settings: FormattingSettings) -> LayoutResult:
        """Lay out a book.

        Args:
            book: The manuscript.
            settings: Formatting settings to lay it out with.

        Returns:
            LayoutResult with pages, total_pages == len(pages), an estimate
            of the printed page count, page geometry and soft warnings.

        Raises:
            ConfigurationError: Unknown trim size or font family.
            ValidationError: Out-of-range settings or degenerate margins.
        """
        validate_settings(settings)
        page_dimensions = resolve_page_size(settings)
        content_area = resolve_content_area(settings)

        pages, warnings = self._composer.compose_with_warnings(book, settings)
        estimated = estimate_book_page_count(
            book, settings, self._config.layout.words_per_page
        )

        logger.debug(
            "Laid out '%s': %d pages (%d estimated) on %s",
            book.title,
            len(pages),
            estimated,
            settings.trim_size,
        )

        return LayoutResult(
            pages=tuple(pages),
            total_pages=len(pages),
            estimated_page_count=estimated,
            page_dimensions=page_dimensions,
            content_area=content_area,
            warnings=tuple(warnings),
        )

    def cover_for(self, result: LayoutResult, settings: FormattingSettings) -> CoverDimensions:
        """Full-wrap cover geometry for a laid-out book.

        Uses the word-count page estimate, since the physical interior page
        count is only known after rendering. Paper type, dpi and bleed come
        from the cover configuration.
        """
        cover_config = self._config.cover
        return resolve_cover_dimensions(
            trim_size=settings.trim_size,
            page_count=max(result.estimated_page_count, 1),
            paper_type=cover_config.paper_type,
            bleed=cover_config.bleed,
            dpi=cover_config.dpi,
            spine_text_min_width=self._config.layout.spine_text_min_width,
        )


def layout(
    book: BookContent, settings: FormattingSettings, config: AppConfig | None = None
) -> LayoutResult:
    """Lay out a book with a fresh :class:`LayoutEngine`."""
    return LayoutEngine(config).layout(book, settings)

"""Word-count based page estimates used for TOC numbering."""

import math
from collections.abc import Sequence

from kdp_layout.errors import ValidationError
from kdp_layout.models.book import BookContent, Chapter
from kdp_layout.models.settings import FormattingSettings

DEFAULT_WORDS_PER_PAGE = 250


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())


def _check_words_per_page(words_per_page: int) -> None:
    if words_per_page <= 0:
        raise ValidationError(f"words_per_page must be positive, got {words_per_page}")


def estimate_chapter_page_count(
    chapter: Chapter, words_per_page: int = DEFAULT_WORDS_PER_PAGE
) -> int:
    """Estimate how many printed pages a chapter occupies.

    A fixed words-per-page baseline, independent of font size and trim
    size. Always at least 1 so TOC numbering keeps increasing even for
    empty chapters.

    Args:
        chapter: The chapter to measure.
        words_per_page: Heuristic page capacity.

    Returns:
        Estimated page count, >= 1.

    Raises:
        ValidationError: If words_per_page is not positive.
    """
    _check_words_per_page(words_per_page)
    return max(1, math.ceil(count_words(chapter.content) / words_per_page))


def estimate_toc_page_numbers(
    chapters: Sequence[Chapter],
    first_page: int,
    words_per_page: int = DEFAULT_WORDS_PER_PAGE,
) -> list[int]:
    """Estimated start page of each chapter, in chapter order."""
    page_numbers: list[int] = []
    next_page = first_page
    for chapter in chapters:
        page_numbers.append(next_page)
        next_page += estimate_chapter_page_count(chapter, words_per_page)
    return page_numbers


def estimate_book_page_count(
    book: BookContent,
    settings: FormattingSettings,
    words_per_page: int = DEFAULT_WORDS_PER_PAGE,
) -> int:
    """Best-effort printed page count: front matter plus chapter estimates."""
    _check_words_per_page(words_per_page)
    front_matter = int(settings.include_title_page) + int(settings.include_toc)
    return front_matter + sum(
        estimate_chapter_page_count(chapter, words_per_page) for chapter in book.chapters
    )

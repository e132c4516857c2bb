"""Tests for data models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from kdp_layout.models import (
    BookContent,
    BookMetadata,
    Chapter,
    FormattingSettings,
    PageDescriptor,
    PageKind,
    Typography,
)


def _book() -> BookContent:
    return BookContent(
        title="The Long Road",
        metadata=BookMetadata(author="A. Writer"),
        chapters=[
            Chapter(id="c1", title="Departure", content="First."),
            Chapter(id="c2", title="Arrival", content="Second."),
        ],
    )


class TestChapter:
    def test_defaults(self) -> None:
        chapter = Chapter(id="1", title="One")
        assert chapter.content == ""
        assert chapter.level == 1

    def test_level_must_be_positive(self) -> None:
        with pytest.raises(PydanticValidationError):
            Chapter(id="1", title="One", level=0)


class TestBookContent:
    def test_empty(self) -> None:
        book = BookContent.empty()
        assert book.title == "Untitled Book"
        assert book.chapters == []
        assert book.metadata.author is None

    def test_duplicate_chapter_ids_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="Duplicate chapter id"):
            BookContent(
                title="T",
                chapters=[
                    Chapter(id="x", title="A"),
                    Chapter(id="x", title="B"),
                ],
            )

    def test_get_chapter(self) -> None:
        assert _book().get_chapter("c2").title == "Arrival"

    def test_get_unknown_chapter(self) -> None:
        with pytest.raises(KeyError):
            _book().get_chapter("missing")

    def test_with_chapter_content_returns_copy(self) -> None:
        book = _book()
        edited = book.with_chapter_content("c1", "Rewritten.")
        assert edited.get_chapter("c1").content == "Rewritten."
        assert edited.get_chapter("c2").content == "Second."
        assert book.get_chapter("c1").content == "First."
        assert [c.id for c in edited.chapters] == ["c1", "c2"]

    def test_with_chapter_content_unknown_id(self) -> None:
        with pytest.raises(KeyError):
            _book().with_chapter_content("nope", "text")

    def test_with_updates(self) -> None:
        book = _book()
        updated = book.with_updates(title="New Title")
        assert updated.title == "New Title"
        assert updated.metadata.author == "A. Writer"
        assert book.title == "The Long Road"

    def test_with_updates_revalidates(self) -> None:
        with pytest.raises(PydanticValidationError):
            _book().with_updates(
                chapters=[{"id": "a", "title": "A"}, {"id": "a", "title": "B"}]
            )

    def test_serialization_roundtrip(self) -> None:
        book = _book()
        restored = BookContent(**book.model_dump())
        assert restored == book


class TestFormattingSettings:
    def test_defaults(self) -> None:
        settings = FormattingSettings()
        assert settings.trim_size == "6x9"
        assert settings.margin_top == 0.75
        assert settings.margin_inside == 0.75
        assert settings.margin_outside == 0.5
        assert settings.bleed is False
        assert settings.font_size == 12
        assert settings.include_toc is True
        assert settings.include_page_numbers is True
        assert settings.include_title_page is True

    def test_accepts_camel_case_keys(self) -> None:
        settings = FormattingSettings.model_validate(
            {"trimSize": "5x8", "marginInside": 0.5, "includeTOC": False, "fontSize": 10}
        )
        assert settings.trim_size == "5x8"
        assert settings.margin_inside == 0.5
        assert settings.include_toc is False
        assert settings.font_size == 10

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(PydanticValidationError):
            FormattingSettings.model_validate({"colour": "red"})

    def test_is_frozen(self) -> None:
        settings = FormattingSettings()
        with pytest.raises(PydanticValidationError):
            settings.font_size = 14  # type: ignore[misc]


class TestPageDescriptor:
    def test_chapter_page(self) -> None:
        typography = Typography(
            font_family="Georgia", font_size=11, line_spacing=1.2, include_page_numbers=True
        )
        page = PageDescriptor(
            kind=PageKind.CHAPTER,
            page_number=3,
            typography=typography,
            chapter_index=1,
            chapter_title="One",
            paragraphs=("a", "b"),
        )
        assert page.kind == "chapter"
        assert page.toc_entries == ()
        assert page.paragraphs == ("a", "b")

"""Manuscript data models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class BookMetadata(BaseModel):
    """Free-form bibliographic metadata shown on the title page."""

    author: str | None = None
    publisher: str | None = None
    year: str | None = None
    isbn: str | None = None


class Chapter(BaseModel):
    """One structural unit of the book.

    ``content`` is plain text with paragraphs separated by a blank line.
    It may be empty; the layout engine skips such chapters.
    """

    id: str
    title: str
    content: str = ""
    level: int = Field(default=1, ge=1)  # 1 = top-level chapter, 2 = section, ...


class BookContent(BaseModel):
    """The manuscript under formatting.

    Chapter order is print order. The layout engine never reorders,
    merges or splits chapters.
    """

    title: str = "Untitled Book"
    metadata: BookMetadata = Field(default_factory=BookMetadata)
    chapters: list[Chapter] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_chapter_ids(self) -> BookContent:
        seen: set[str] = set()
        for chapter in self.chapters:
            if chapter.id in seen:
                raise ValueError(f"Duplicate chapter id: '{chapter.id}'")
            seen.add(chapter.id)
        return self

    @classmethod
    def empty(cls) -> BookContent:
        """Return the blank manuscript a project starts from (or is reset to)."""
        return cls()

    def get_chapter(self, chapter_id: str) -> Chapter:
        """Look up a chapter by id.

        Raises:
            KeyError: If no chapter has this id.
        """
        for chapter in self.chapters:
            if chapter.id == chapter_id:
                return chapter
        raise KeyError(chapter_id)

    def with_chapter_content(self, chapter_id: str, content: str) -> BookContent:
        """Return a copy with one chapter's text replaced.

        Args:
            chapter_id: Id of the chapter to edit.
            content: New raw text for that chapter.

        Returns:
            A new BookContent; this instance is left untouched.

        Raises:
            KeyError: If no chapter has this id.
        """
        self.get_chapter(chapter_id)
        chapters = [
            chapter.model_copy(update={"content": content}) if chapter.id == chapter_id else chapter
            for chapter in self.chapters
        ]
        return self.model_copy(update={"chapters": chapters})

    def with_updates(self, **fields: object) -> BookContent:
        """Return a copy with top-level fields replaced, re-validated."""
        data = self.model_dump()
        data.update(fields)
        return BookContent.model_validate(data)

"""Paragraph segmentation and markup escaping for chapter text."""

import re

# Two or more line breaks, possibly with whitespace-only lines between them
PARAGRAPH_BREAK = re.compile(r"\n(?:[^\S\n]*\n)+")
# Runs of whitespace other than newlines
HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")

MARKUP_ESCAPES: dict[str, str] = {
    "&": "&amp;",  # must run first
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


def normalize_text(raw_text: str) -> str:
    """Normalize chapter text so paragraphs are separated by exactly one blank line.

    Line endings become ``\\n``, blank-line runs collapse to a single
    paragraph separator, and runs of spaces/tabs collapse to one space
    inside each line. Newlines are never merged into spaces, so paragraph
    boundaries are preserved.

    Args:
        raw_text: Chapter content as supplied by the manuscript.

    Returns:
        Normalized text, stripped of leading and trailing whitespace.
    """
    text = raw_text.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not text:
        return ""

    text = PARAGRAPH_BREAK.sub("\n\n", text)
    text = HORIZONTAL_WHITESPACE.sub(" ", text)
    lines = [line.strip() for line in text.split("\n")]
    return "\n".join(lines)


def segment_paragraphs(raw_text: str) -> list[str]:
    """Split chapter text into an ordered list of paragraphs.

    Empty or whitespace-only text yields an empty list.
    """
    normalized = normalize_text(raw_text)
    if not normalized:
        return []

    paragraphs = []
    for para in normalized.split("\n\n"):
        stripped = para.strip()
        if stripped:
            paragraphs.append(stripped)
    return paragraphs


def escape_markup(text: str) -> str:
    """Escape text for embedding in HTML/XML markup."""
    for char, entity in MARKUP_ESCAPES.items():
        text = text.replace(char, entity)
    return text

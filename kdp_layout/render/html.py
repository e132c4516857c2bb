"""HTML rendering of page descriptors for preview and print export.

The same markup and CSS serve both the interactive preview and the PDF
export, so the two look identical. All text is escaped here and nowhere
else.
"""

from kdp_layout.layout.dimensions import inches_to_points
from kdp_layout.layout.segmenter import escape_markup
from kdp_layout.models.dimensions import ContentArea, PageDimensions
from kdp_layout.models.page import LayoutResult, PageDescriptor, PageKind, TocEntry

# Fallback stacks for fonts browsers may not ship
FONT_STACKS: dict[str, str] = {
    "Times New Roman": 'Times, "Times New Roman", serif',
    "Minion Pro": '"Minion Pro", Garamond, serif',
    "Futura": 'Futura, "Century Gothic", sans-serif',
}


def _font_stack(font_family: str) -> str:
    return FONT_STACKS.get(font_family, f'"{font_family}", serif')


def _render_title(page: PageDescriptor) -> str:
    parts = [f'<h1 class="title">{escape_markup(page.title or "")}</h1>']
    if page.author:
        parts.append(f'<p class="author">{escape_markup(page.author)}</p>')
    if page.publisher:
        parts.append(f'<p class="publisher">{escape_markup(page.publisher)}</p>')
    if page.year:
        parts.append(f'<p class="year">{escape_markup(page.year)}</p>')
    return "".join(parts)


def _toc_label(entry: TocEntry) -> str:
    title = escape_markup(entry.title)
    if entry.chapter_index is None:
        return title
    return f"Chapter {entry.chapter_index}: {title}"


def _render_toc(page: PageDescriptor) -> str:
    entries = "".join(
        f'<div class="toc-entry"><span>{_toc_label(entry)}</span>'
        f"<span>{entry.estimated_page_number}</span></div>"
        for entry in page.toc_entries
    )
    return f'<div class="toc"><h2>Table of Contents</h2>{entries}</div>'


def _render_chapter(page: PageDescriptor) -> str:
    parts = [
        f'<div class="chapter-number">Chapter {page.chapter_index}</div>',
        f'<h2 class="chapter-title">{escape_markup(page.chapter_title or "")}</h2>',
    ]
    for i, paragraph in enumerate(page.paragraphs):
        css_class = "no-indent" if i == 0 else "indent"
        parts.append(f'<p class="{css_class}">{escape_markup(paragraph)}</p>')
    return "".join(parts)


def render_page(page: PageDescriptor) -> str:
    """Render one page descriptor to a ``<div class="page">`` block."""
    if page.kind is PageKind.TITLE:
        inner = _render_title(page)
    elif page.kind is PageKind.TOC:
        inner = _render_toc(page)
    else:
        inner = _render_chapter(page)

    footer = ""
    if page.typography.include_page_numbers:
        footer = f'<div class="page-number">{page.page_number}</div>'

    return (
        f'<div class="page page-{page.kind.value}" data-page="{page.page_number}">'
        f"{inner}{footer}</div>"
    )


def render_css(
    page_size: PageDimensions, content_area: ContentArea, page: PageDescriptor | None = None
) -> str:
    """Stylesheet for the given geometry and (optionally) a page's typography."""
    typography = ""
    if page is not None:
        t = page.typography
        typography = (
            f"font-family: {_font_stack(t.font_family)}; "
            f"font-size: {t.font_size}pt; line-height: {t.line_spacing};"
        )
    # CSS shorthand order: top right bottom left
    margins = (
        content_area.margin_top,
        content_area.margin_outside,
        content_area.margin_bottom,
        content_area.margin_inside,
    )
    padding = " ".join(f"{inches_to_points(m):g}pt" for m in margins)
    footer_offset = inches_to_points(content_area.margin_bottom / 2)
    return f"""
@page {{ size: {page_size.width_in}in {page_size.height_in}in; margin: 0; }}
* {{ box-sizing: border-box; }}
body {{ margin: 0; padding: 0; }}
.page {{
    width: {page_size.width_in}in;
    height: {page_size.height_in}in;
    padding: {padding};
    position: relative;
    page-break-after: always;
    {typography}
}}
.page-number {{ position: absolute; bottom: {footer_offset:g}pt; left: 0; right: 0; text-align: center; }}
h1.title {{ font-size: 2.2em; text-align: center; margin-top: 40%; text-transform: uppercase; }}
p.author {{ text-align: center; margin-top: 2em; }}
p.publisher, p.year {{ text-align: center; margin-top: 1em; font-size: 0.9em; color: #666; }}
.toc h2 {{ text-align: center; margin-bottom: 2em; text-transform: uppercase; }}
.toc-entry {{ display: flex; justify-content: space-between; margin-bottom: 0.5em; }}
.chapter-number {{ text-align: center; margin-bottom: 0.8em; font-size: 0.9em; color: #666; }}
h2.chapter-title {{ text-align: center; text-transform: uppercase; margin: 0 auto 1.5em; font-size: 1.4em; }}
p {{ text-align: justify; margin-bottom: 1em; }}
p.indent {{ text-indent: 1.3em; }}
p.no-indent {{ text-indent: 0; }}
"""


def render_book(result: LayoutResult, title: str = "") -> str:
    """Render a whole layout result to a standalone HTML document.

    An empty result renders a "no content" placeholder instead of pages.
    """
    first = result.pages[0] if result.pages else None
    css = render_css(result.page_dimensions, result.content_area, first)
    if result.pages:
        body = "\n".join(render_page(page) for page in result.pages)
    else:
        body = '<div class="empty">No content yet</div>'
    return (
        "<!DOCTYPE html>\n"
        f'<html><head><meta charset="utf-8"><title>{escape_markup(title)}</title>'
        f"<style>{css}</style></head>\n"
        f"<body>\n{body}\n</body></html>\n"
    )

"""Renderers consuming layout results."""

from kdp_layout.render.html import render_book, render_page

__all__ = ["render_book", "render_page"]

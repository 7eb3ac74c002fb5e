"""Markdown rendering for mddocs."""

from .engine import MarkdownRenderer
from .template import render_page

__all__ = ["MarkdownRenderer", "render_page"]

"""Markup rendering for note content.

The notes subsystem only depends on the ``Renderer`` protocol; the Markdown
implementation below is the one the page uses.
"""

from __future__ import annotations

from typing import Protocol

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

DisplayTree = SyntaxTreeNode


class Renderer(Protocol):
    """Transforms raw note content into display structure."""

    def render(self, content: str) -> DisplayTree: ...

    def to_html(self, content: str) -> str: ...


class MarkdownRenderer:
    """CommonMark renderer with raw HTML disabled.

    Headings, emphasis, lists and links are rendered; inline or block HTML
    in the source is escaped and shown as text.
    """

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark", {"html": False})

    def render(self, content: str) -> DisplayTree:
        """Parse ``content`` into a tree of display nodes."""
        return SyntaxTreeNode(self._md.parse(content))

    def to_html(self, content: str) -> str:
        return self._md.render(content)

"""Markdown rendering for question, choice and card text.

Module content is authored in Markdown. Qt labels understand a subset of
HTML, so text is rendered to HTML fragments once and handed to the labels as
rich text. Raw HTML in the source is escaped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class QuestionTextRenderer:
    """Converts Markdown into HTML fragments for rich-text labels."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render block-level Markdown (paragraphs, lists, tables)."""

        sanitized = (markdown_text or "").strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_question(self, question_text: str, font_size: int = 14) -> str:
        body = self.render_fragment(question_text)
        return f'<div style="font-size: {font_size}pt;">{body}</div>'


renderer = QuestionTextRenderer()

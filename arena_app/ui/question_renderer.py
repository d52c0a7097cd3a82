"""Question rendering utilities for the game screens."""

from __future__ import annotations

from arena_app.core.text_renderer import renderer


def render_question_html(question_text: str, font_size: int = 14) -> str:
    """Render a question's Markdown text as rich text for a QLabel."""
    return renderer.render_question(question_text or "(No question text)", font_size=font_size)


def format_choice_label(key: str, choice_text: str) -> str:
    """Button caption such as ``A. Paris`` for the ``choice_a`` key."""
    letter = key.split("_")[-1].upper()
    return f"{letter}. {choice_text or '(empty)'}"

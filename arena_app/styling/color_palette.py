"""Color palette for ArenaQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#1B1B2F", dark="#F5F7FF")
    TEXT_SECONDARY = ThemeColors(light="#5B5B7A", dark="#A9B0D0")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1B0F3B")
    BACKGROUND_SECONDARY = ThemeColors(light="#F1EEFB", dark="#2B1A5A")

    ACCENT_PRIMARY = ThemeColors(light="#6C63FF", dark="#8F88FF")

    # Answer feedback
    CORRECT = ThemeColors(light="#28A745", dark="#5DD879")
    WRONG = ThemeColors(light="#DC3545", dark="#FF6B6B")
    TIMER_URGENT = ThemeColors(light="#DC3545", dark="#FF6B6B")

    # Matching cards
    CARD_HIDDEN = ThemeColors(light="#5327C8", dark="#5327C8")
    CARD_REVEALED = ThemeColors(light="#FFD86B", dark="#FFD86B")
    CARD_MATCHED = ThemeColors(light="#28A745", dark="#2E8B57")

    BORDER_PRIMARY = ThemeColors(light="#D1D1E0", dark="#4A3F7A")
    BUTTON_PRIMARY_BG = ThemeColors(light="#6C63FF", dark="#8F88FF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F1EEFB", dark="#3A2A70")
    BUTTON_HOVER_BG = ThemeColors(light="#E2DCFA", dark="#4B3A8A")

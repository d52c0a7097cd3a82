"""Centralized styles for the game screens."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 8px 14px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                background: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_option_style(state: str, theme: Theme = Theme.LIGHT) -> str:
        """Style for an answer button: ``idle``, ``correct`` or ``wrong``."""
        if state == "correct":
            return f"background-color: {ColorPalette.CORRECT.get(theme)}; color: #fff;"
        if state == "wrong":
            return f"background-color: {ColorPalette.WRONG.get(theme)}; color: #fff;"
        return ""

    @staticmethod
    def get_timer_style(urgent: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.TIMER_URGENT if urgent else ColorPalette.ACCENT_PRIMARY
        return f"font-size: 18pt; font-weight: 800; color: {color.get(theme)};"

    @staticmethod
    def get_card_style(state: str, theme: Theme = Theme.LIGHT) -> str:
        """Style for a matching card: ``hidden``, ``revealed`` or ``matched``."""
        palette = {
            "hidden": (ColorPalette.CARD_HIDDEN, "#fff"),
            "revealed": (ColorPalette.CARD_REVEALED, "#1B1B2F"),
            "matched": (ColorPalette.CARD_MATCHED, "#fff"),
        }
        background, text = palette.get(state, palette["hidden"])
        return (
            f"background-color: {background.get(theme)}; color: {text}; "
            "border-radius: 10px; padding: 12px; min-height: 90px;"
        )

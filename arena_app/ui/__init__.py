"""Qt UI components for the game arena."""

from .arena_main_window import ArenaMainWindow
from .dialog_helpers import confirm_leave_game, show_error, show_info, show_prompt, show_warning
from .qt_scheduler import QtScheduler

__all__ = [
    "ArenaMainWindow",
    "QtScheduler",
    "confirm_leave_game",
    "show_error",
    "show_info",
    "show_prompt",
    "show_warning",
]

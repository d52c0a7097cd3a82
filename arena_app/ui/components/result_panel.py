"""Component showing a finished session's score and the XP it earned."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from arena_app.constants.ui_constants import (
    RESULT_HOME_BUTTON,
    RESULT_RETRY_BUTTON,
    RESULT_SAVING_MESSAGE,
    RESULT_TITLE,
)
from arena_app.core.game_manager import GameManager
from arena_app.core.models import FinalResult, ReportOutcome
from arena_app.styling.styles import Styles
from arena_app.ui.background_task import BackgroundTask, run_in_background
from arena_app.ui.dialog_helpers import show_error

logger = logging.getLogger(__name__)


class ResultPanel(QWidget):
    """Submits the result once and shows what the server granted."""

    def __init__(
        self,
        game_manager: GameManager,
        on_home: Callable[[], None],
        on_retry: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.game_manager = game_manager
        self.on_home = on_home
        self.on_retry = on_retry
        self._generation: int | None = None
        self._task: BackgroundTask | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(RESULT_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.percent_label = QLabel("", self)
        self.percent_label.setAlignment(Qt.AlignCenter)
        self.percent_label.setStyleSheet("font-size: 36pt; font-weight: 800;")
        layout.addWidget(self.percent_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.xp_label = QLabel("", self)
        self.xp_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.xp_label)

        self.home_button = QPushButton(RESULT_HOME_BUTTON, self)
        self.home_button.clicked.connect(self.on_home)
        layout.addWidget(self.home_button)

        self.retry_button = QPushButton(RESULT_RETRY_BUTTON, self)
        self.retry_button.clicked.connect(self.on_retry)
        layout.addWidget(self.retry_button)
        layout.addStretch()

    def show_result(self, result: FinalResult) -> None:
        self.percent_label.setText(f"{result.percentage}%")
        self.score_label.setText(f"{result.correct} / {result.total}")
        self.xp_label.setText(RESULT_SAVING_MESSAGE)
        if self.game_manager.has_submitted(result.session_id):
            return
        generation = self.game_manager.get_generation()
        self._generation = generation
        self._task = run_in_background(
            self.game_manager.submit_result,
            result,
            on_success=lambda outcome: self._handle_saved(generation, outcome),
            on_failure=lambda exc: self._handle_failed(generation, exc),
        )

    def _handle_saved(self, generation: int, outcome: ReportOutcome) -> None:
        if not self._is_current(generation):
            return
        self.xp_label.setText(f"✨ +{outcome.xp_earned} XP")

    def _handle_failed(self, generation: int, exc: Exception) -> None:
        if not self._is_current(generation):
            return
        self.xp_label.setText("+0 XP")
        show_error(self, "Score not saved", f"Your score could not be saved.\n{exc}")

    def _is_current(self, generation: int) -> bool:
        current = generation == self._generation and self.game_manager.is_current(generation)
        if not current:
            logger.debug("Ignoring stale submission callback (generation %d)", generation)
        return current

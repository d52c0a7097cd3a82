"""Qt main window switching between the menu, the game screens and results."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from arena_app.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from arena_app.constants.ui_constants import WINDOW_TITLE
from arena_app.core.game_manager import GameKind, GameManager
from arena_app.core.models import FinalResult
from arena_app.core.services.game_session import EmptyResultError, GameSession
from arena_app.core.services.matching_session import MatchingSession
from arena_app.core.services.quiz_session import QuizSession
from arena_app.core.services.rps_session import RpsMode, RpsSession
from arena_app.styling import Theme
from arena_app.styling.styles import Styles
from arena_app.ui.background_task import BackgroundTask, run_in_background
from arena_app.ui.components.matching_panel import MatchingPanel
from arena_app.ui.components.menu_panel import MenuPanel
from arena_app.ui.components.quiz_panel import QuizPanel
from arena_app.ui.components.result_panel import ResultPanel
from arena_app.ui.components.rps_panel import RpsPanel
from arena_app.ui.dialog_helpers import confirm_leave_game, show_info, show_warning

logger = logging.getLogger(__name__)


class ArenaScreen(Enum):
    """Screen currently shown in the window."""

    MENU = auto()
    QUIZ = auto()
    MATCHING = auto()
    RPS = auto()
    RESULT = auto()


class ArenaMainWindow(QMainWindow):
    """Main Qt window; owns no game state beyond what the GameManager holds."""

    def __init__(self, game_manager: GameManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.game_manager = game_manager
        self._screen = ArenaScreen.MENU
        self._theme = Theme.LIGHT
        self._load_task: BackgroundTask | None = None

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.theme_button = QPushButton("Dark Mode", self)
        self.theme_button.clicked.connect(self._handle_toggle_theme)
        button_row.addWidget(self.theme_button)
        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(lambda: show_info(self, f"{APP_NAME} Help", HELP_TEXT))
        button_row.addWidget(self.help_button)
        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)
        root_layout.addLayout(button_row)

        self.screen_stack = QStackedWidget(self)
        self.menu_panel = MenuPanel(
            self.game_manager,
            on_load_module=self._handle_load_module,
            on_start_game=self._handle_start_game,
            parent=self,
        )
        self.quiz_panel = QuizPanel(on_back=self._handle_back, parent=self)
        self.matching_panel = MatchingPanel(on_back=self._handle_back, parent=self)
        self.rps_panel = RpsPanel(on_back=self._handle_back, parent=self)
        self.result_panel = ResultPanel(
            self.game_manager,
            on_home=self._handle_home,
            on_retry=self._handle_retry,
            parent=self,
        )
        self._panels = {
            ArenaScreen.MENU: self.menu_panel,
            ArenaScreen.QUIZ: self.quiz_panel,
            ArenaScreen.MATCHING: self.matching_panel,
            ArenaScreen.RPS: self.rps_panel,
            ArenaScreen.RESULT: self.result_panel,
        }
        for panel in self._panels.values():
            self.screen_stack.addWidget(panel)
        root_layout.addWidget(self.screen_stack)
        self._set_screen(ArenaScreen.MENU)

    def _set_screen(self, screen: ArenaScreen) -> None:
        self._screen = screen
        self.screen_stack.setCurrentWidget(self._panels[screen])

    # --- Module loading ---

    def _handle_load_module(self, module_id: str) -> None:
        generation = self.game_manager.begin_loading(module_id)
        self._unbind_game_panels()
        self.menu_panel.refresh()
        self._load_task = run_in_background(
            self.game_manager.fetch_questions,
            module_id,
            on_success=lambda questions: self._handle_questions_loaded(generation, questions),
            on_failure=lambda exc: self._handle_questions_loaded(generation, []),
        )

    def _handle_questions_loaded(self, generation: int, questions: list) -> None:
        if self.game_manager.finish_loading(generation, questions):
            self.menu_panel.refresh()

    # --- Games ---

    def _handle_start_game(self, kind: GameKind, rps_mode: RpsMode | None) -> None:
        try:
            session = self.game_manager.start_game(
                kind,
                rps_mode=rps_mode,
                on_change=self._handle_session_changed,
                on_finished=self._handle_session_finished,
            )
        except EmptyResultError as exc:
            show_warning(self, "No questions", str(exc))
            return
        self._show_session(session)

    def _show_session(self, session: GameSession) -> None:
        self._unbind_game_panels()
        if isinstance(session, QuizSession):
            self.quiz_panel.bind(session)
            self._set_screen(ArenaScreen.QUIZ)
        elif isinstance(session, MatchingSession):
            self.matching_panel.bind(session)
            self._set_screen(ArenaScreen.MATCHING)
        elif isinstance(session, RpsSession):
            self.rps_panel.bind(session)
            self._set_screen(ArenaScreen.RPS)

    def _handle_session_changed(self) -> None:
        panel = self._panels.get(self._screen)
        if panel in (self.quiz_panel, self.matching_panel, self.rps_panel):
            panel.refresh()

    def _handle_session_finished(self, result: FinalResult) -> None:
        self._unbind_game_panels()
        self._set_screen(ArenaScreen.RESULT)
        self.result_panel.show_result(result)

    def _handle_back(self) -> None:
        session = self.game_manager.get_active_session()
        if session is not None and session.is_live and not confirm_leave_game(self):
            return
        self._handle_home()

    def _handle_home(self) -> None:
        self.game_manager.end_session()
        self._unbind_game_panels()
        self.menu_panel.refresh()
        self._set_screen(ArenaScreen.MENU)

    def _handle_retry(self) -> None:
        try:
            session = self.game_manager.retry_game(
                on_change=self._handle_session_changed,
                on_finished=self._handle_session_finished,
            )
        except (EmptyResultError, RuntimeError) as exc:
            show_warning(self, "Cannot retry", str(exc))
            self._handle_home()
            return
        self._show_session(session)

    def _unbind_game_panels(self) -> None:
        self.quiz_panel.unbind()
        self.matching_panel.unbind()
        self.rps_panel.unbind()

    # --- Window chrome ---

    def _handle_about(self) -> None:
        details = f"{APP_NAME} v{APP_VERSION}\nLicense: {APP_LICENSE}\n\n{APP_ABOUT_TEXT}"
        show_info(self, f"About {APP_NAME}", details)

    def _handle_toggle_theme(self) -> None:
        self._theme = Theme.DARK if self._theme == Theme.LIGHT else Theme.LIGHT
        self.theme_button.setText("Light Mode" if self._theme == Theme.DARK else "Dark Mode")
        self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.game_manager.end_session()
        super().closeEvent(event)

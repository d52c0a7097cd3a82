"""Component for choosing a module and a game."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from arena_app.constants.ui_constants import (
    GAME_BUTTON_MATCHING,
    GAME_BUTTON_QUIZ,
    GAME_BUTTON_RPS_CHALLENGE,
    GAME_BUTTON_RPS_CLASSIC,
    MENU_DESCRIPTION,
    MENU_EMPTY_MESSAGE,
    MENU_IDLE_MESSAGE,
    MENU_LOAD_BUTTON,
    MENU_LOADING_MESSAGE,
    MENU_READY_TEMPLATE,
)
from arena_app.core.game_manager import GameKind, GameManager, LoadState
from arena_app.core.services.rps_session import RpsMode
from arena_app.styling.styles import Styles


class MenuPanel(QWidget):
    """Loads a module's questions and offers the games once they are ready."""

    def __init__(
        self,
        game_manager: GameManager,
        on_load_module: Callable[[str], None],
        on_start_game: Callable[[GameKind, RpsMode | None], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.game_manager = game_manager
        self.on_load_module = on_load_module
        self.on_start_game = on_start_game
        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.description_label = QLabel(MENU_DESCRIPTION, self)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        self.profile_label = QLabel("", self)
        self.profile_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.profile_label)

        module_row = QHBoxLayout()
        module_row.addWidget(QLabel("Module:", self))
        self.module_input = QLineEdit(self)
        self.module_input.setPlaceholderText("e.g. 3")
        self.module_input.returnPressed.connect(self._handle_load)
        module_row.addWidget(self.module_input, stretch=1)
        self.load_button = QPushButton(MENU_LOAD_BUTTON, self)
        self.load_button.clicked.connect(self._handle_load)
        module_row.addWidget(self.load_button)
        layout.addLayout(module_row)

        self.status_label = QLabel(MENU_IDLE_MESSAGE, self)
        self.status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.status_label)

        grid = QGridLayout()
        self.quiz_button = QPushButton(GAME_BUTTON_QUIZ, self)
        self.quiz_button.clicked.connect(lambda: self.on_start_game(GameKind.QUIZ, None))
        self.matching_button = QPushButton(GAME_BUTTON_MATCHING, self)
        self.matching_button.clicked.connect(lambda: self.on_start_game(GameKind.MATCHING, None))
        self.rps_classic_button = QPushButton(GAME_BUTTON_RPS_CLASSIC, self)
        self.rps_classic_button.clicked.connect(
            lambda: self.on_start_game(GameKind.RPS, RpsMode.CLASSIC)
        )
        self.rps_challenge_button = QPushButton(GAME_BUTTON_RPS_CHALLENGE, self)
        self.rps_challenge_button.clicked.connect(
            lambda: self.on_start_game(GameKind.RPS, RpsMode.CHALLENGE)
        )
        self.game_buttons = [
            self.quiz_button,
            self.matching_button,
            self.rps_classic_button,
            self.rps_challenge_button,
        ]
        for idx, button in enumerate(self.game_buttons):
            grid.addWidget(button, idx // 2, idx % 2)
        layout.addLayout(grid)
        layout.addStretch()

    def _handle_load(self) -> None:
        module_id = self.module_input.text().strip()
        if not module_id:
            return
        self.on_load_module(module_id)

    def refresh(self) -> None:
        profile = self.game_manager.get_profile()
        if profile is not None:
            self.profile_label.setText(f"{profile.fullname or 'Student'} · {profile.xp} XP")
        else:
            self.profile_label.setText("Not signed in")

        state = self.game_manager.get_load_state()
        ready = state is LoadState.READY
        if state is LoadState.LOADING:
            self.status_label.setText(MENU_LOADING_MESSAGE)
        elif state is LoadState.EMPTY:
            self.status_label.setText(MENU_EMPTY_MESSAGE)
        elif ready:
            self.status_label.setText(
                MENU_READY_TEMPLATE.format(
                    count=len(self.game_manager.get_questions()),
                    module_id=self.game_manager.get_module_id(),
                )
            )
        else:
            self.status_label.setText(MENU_IDLE_MESSAGE)

        self.load_button.setEnabled(state is not LoadState.LOADING)
        for button in self.game_buttons:
            button.setEnabled(ready)

"""Component for rock-paper-scissors with bonus questions."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from arena_app.constants.game_constants import CHOICE_KEYS, RPS_CHOICES, TIMER_URGENT_SECONDS
from arena_app.constants.ui_constants import (
    BACK_BUTTON,
    HINT_BUTTON,
    RPS_CHALLENGE_INSTRUCTIONS,
    RPS_CLASSIC_INSTRUCTIONS,
    RPS_HINT_TEXT,
    RPS_HINT_TITLE,
    RPS_INSTRUCTIONS_TITLE,
)
from arena_app.core.services.rps_session import Outcome, RpsMode, RpsPhase, RpsSession
from arena_app.styling.styles import Styles
from arena_app.ui.dialog_helpers import show_prompt
from arena_app.ui.question_renderer import format_choice_label, render_question_html

_HAND_ICONS = {"rock": "✊", "paper": "✋", "scissors": "✌"}
_OUTCOME_TEXT = {Outcome.WIN: "YOU WIN!", Outcome.LOSE: "YOU LOSE!", Outcome.TIE: "TIE!"}


class RpsPanel(QWidget):
    """Mode menu, round arena and the bonus-question box."""

    def __init__(self, on_back: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back = on_back
        self._session: RpsSession | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header = QHBoxLayout()
        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        header.addWidget(self.back_button)
        header.addStretch()
        self.hint_button = QPushButton(HINT_BUTTON, self)
        self.hint_button.clicked.connect(self._handle_hint)
        header.addWidget(self.hint_button)
        layout.addLayout(header)

        # Mode menu
        self.menu_box = QWidget(self)
        menu_layout = QHBoxLayout()
        self.menu_box.setLayout(menu_layout)
        self.classic_button = QPushButton("Classic", self.menu_box)
        self.classic_button.clicked.connect(lambda: self._handle_mode(RpsMode.CLASSIC))
        menu_layout.addWidget(self.classic_button)
        self.challenge_button = QPushButton("Challenge", self.menu_box)
        self.challenge_button.clicked.connect(lambda: self._handle_mode(RpsMode.CHALLENGE))
        menu_layout.addWidget(self.challenge_button)
        layout.addWidget(self.menu_box)

        # Arena
        self.round_label = QLabel("", self)
        self.round_label.setAlignment(Qt.AlignCenter)
        self.round_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.round_label)

        self.arena_label = QLabel("", self)
        self.arena_label.setAlignment(Qt.AlignCenter)
        self.arena_label.setStyleSheet("font-size: 40pt;")
        layout.addWidget(self.arena_label)

        self.result_label = QLabel("", self)
        self.result_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.result_label)

        choice_row = QHBoxLayout()
        self.hand_buttons: dict[str, QPushButton] = {}
        for hand in RPS_CHOICES:
            button = QPushButton(f"{_HAND_ICONS[hand]} {hand.title()}", self)
            button.clicked.connect(lambda _checked=False, h=hand: self._handle_hand(h))
            choice_row.addWidget(button)
            self.hand_buttons[hand] = button
        layout.addLayout(choice_row)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        # Bonus question
        self.bonus_box = QGroupBox("Bonus Question", self)
        bonus_layout = QVBoxLayout()
        self.bonus_box.setLayout(bonus_layout)
        self.bonus_timer_label = QLabel("", self.bonus_box)
        bonus_layout.addWidget(self.bonus_timer_label)
        self.bonus_question_label = QLabel("", self.bonus_box)
        self.bonus_question_label.setTextFormat(Qt.RichText)
        self.bonus_question_label.setWordWrap(True)
        bonus_layout.addWidget(self.bonus_question_label)
        self.bonus_buttons: dict[str, QPushButton] = {}
        for key in CHOICE_KEYS:
            button = QPushButton("", self.bonus_box)
            button.clicked.connect(lambda _checked=False, k=key: self._handle_bonus(k))
            bonus_layout.addWidget(button)
            self.bonus_buttons[key] = button
        layout.addWidget(self.bonus_box)
        layout.addStretch()

    # --- Session binding ---

    def bind(self, session: RpsSession) -> None:
        self._session = session
        self.refresh()
        if session.mode is not RpsMode.MENU:
            QTimer.singleShot(0, self._show_instructions)

    def unbind(self) -> None:
        self._session = None

    def _show_instructions(self) -> None:
        session = self._session
        if session is None or not session.is_live:
            return
        text = (
            RPS_CHALLENGE_INSTRUCTIONS
            if session.mode is RpsMode.CHALLENGE
            else RPS_CLASSIC_INSTRUCTIONS
        )
        show_prompt(self, RPS_INSTRUCTIONS_TITLE, text, "Got it")
        if self._session is session:
            session.dismiss_instructions()

    # --- Handlers ---

    def _handle_mode(self, mode: RpsMode) -> None:
        if self._session is not None and self._session.select_mode(mode):
            QTimer.singleShot(0, self._show_instructions)

    def _handle_hand(self, hand: str) -> None:
        if self._session is not None:
            self._session.play_round(hand)

    def _handle_bonus(self, key: str) -> None:
        session = self._session
        if session is None or session.current_bonus_question is None:
            return
        session.answer_bonus(session.current_bonus_question.choice(key))

    def _handle_hint(self) -> None:
        session = self._session
        if session is None:
            return
        session.open_prompt()
        show_prompt(self, RPS_HINT_TITLE, RPS_HINT_TEXT, "Close")
        if self._session is session:
            session.close_prompt()

    # --- Rendering ---

    def refresh(self) -> None:
        session = self._session
        if session is None or session.is_finished:
            return
        in_menu = session.mode is RpsMode.MENU
        self.menu_box.setVisible(in_menu)
        for widget in (self.round_label, self.arena_label, self.result_label, self.score_label):
            widget.setVisible(not in_menu)
        if in_menu:
            for button in self.hand_buttons.values():
                button.setVisible(False)
            self.bonus_box.setVisible(False)
            return

        self.round_label.setText(f"Round {session.round} / {session.total_rounds}")
        last = session.last_round
        if last is not None:
            self.arena_label.setText(f"{_HAND_ICONS[last.player]}  VS  {_HAND_ICONS[last.cpu]}")
            self.result_label.setText(_OUTCOME_TEXT[last.outcome])
        else:
            self.arena_label.setText("VS")
            self.result_label.setText("")
        self.score_label.setText(f"Score: {session.score} / {session.max_score}")

        can_play = session.phase is RpsPhase.AWAITING_CHOICE
        for button in self.hand_buttons.values():
            button.setVisible(True)
            button.setEnabled(can_play)

        question = session.current_bonus_question
        self.bonus_box.setVisible(question is not None)
        if question is not None:
            time_left = session.time_left or 0
            self.bonus_timer_label.setText(f"{time_left}s")
            self.bonus_timer_label.setStyleSheet(
                Styles.get_timer_style(time_left <= TIMER_URGENT_SECONDS)
            )
            self.bonus_question_label.setText(render_question_html(question.question))
            for key, button in self.bonus_buttons.items():
                button.setText(format_choice_label(key, question.choice(key)))

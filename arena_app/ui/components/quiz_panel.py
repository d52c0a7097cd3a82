"""Component for the timed multiple-choice quiz."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from arena_app.constants.game_constants import (
    CHOICE_KEYS,
    QUIZ_TIME_LIMIT_SECONDS,
    TIMER_URGENT_SECONDS,
)
from arena_app.constants.ui_constants import (
    BACK_BUTTON,
    HINT_BUTTON,
    QUIZ_HINT_TEXT,
    QUIZ_HINT_TITLE,
    QUIZ_INSTRUCTIONS_TEXT,
    QUIZ_INSTRUCTIONS_TITLE,
    QUIZ_NEXT_BUTTON,
    QUIZ_RESULTS_BUTTON,
)
from arena_app.core.services.quiz_session import QuizPhase, QuizSession
from arena_app.styling.styles import Styles
from arena_app.ui.dialog_helpers import show_prompt
from arena_app.ui.question_renderer import format_choice_label, render_question_html


class QuizPanel(QWidget):
    """Renders a QuizSession and forwards clicks to it."""

    def __init__(self, on_back: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back = on_back
        self._session: QuizSession | None = None
        self._game_font_size: int = 14
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header = QHBoxLayout()
        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        header.addWidget(self.back_button)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 1000)
        self.progress_bar.setTextVisible(False)
        header.addWidget(self.progress_bar, stretch=1)

        self.hint_button = QPushButton(HINT_BUTTON, self)
        self.hint_button.clicked.connect(self._handle_hint)
        header.addWidget(self.hint_button)
        layout.addLayout(header)

        self.timer_label = QLabel("", self)
        self.timer_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.timer_label)

        self.counter_label = QLabel("", self)
        self.counter_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.counter_label)

        self.question_label = QLabel("", self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        layout.addWidget(self.question_label)

        self.option_buttons: dict[str, QPushButton] = {}
        for key in CHOICE_KEYS:
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, k=key: self._handle_choice(k))
            layout.addWidget(button)
            self.option_buttons[key] = button

        self.next_button = QPushButton(QUIZ_NEXT_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next)
        layout.addWidget(self.next_button)
        layout.addStretch()

    # --- Session binding ---

    def bind(self, session: QuizSession) -> None:
        self._session = session
        self.refresh()
        # Let the panel paint before the modal instructions appear.
        QTimer.singleShot(0, self._show_instructions)

    def unbind(self) -> None:
        self._session = None

    def _show_instructions(self) -> None:
        session = self._session
        if session is None or not session.is_live:
            return
        show_prompt(
            self,
            QUIZ_INSTRUCTIONS_TITLE,
            QUIZ_INSTRUCTIONS_TEXT.format(
                count=session.question_count, seconds=QUIZ_TIME_LIMIT_SECONDS
            ),
            "Let's Go!",
        )
        if self._session is session:
            session.dismiss_instructions()

    # --- Handlers ---

    def _handle_choice(self, key: str) -> None:
        if self._session is not None:
            self._session.select_choice(key)

    def _handle_next(self) -> None:
        if self._session is not None:
            self._session.advance()

    def _handle_hint(self) -> None:
        session = self._session
        if session is None or session.hint_used or session.phase is not QuizPhase.AWAITING_ANSWER:
            return
        session.open_prompt()
        accepted = show_prompt(self, QUIZ_HINT_TITLE, QUIZ_HINT_TEXT, "Use Hint", "Cancel")
        if self._session is not session:
            return
        if accepted:
            session.use_hint()
        else:
            session.close_prompt()

    # --- Rendering ---

    def refresh(self) -> None:
        session = self._session
        if session is None or session.is_finished:
            return
        question = session.current_question
        revealed = session.phase is QuizPhase.ANSWER_REVEALED

        self.progress_bar.setValue(int(session.progress * 1000))
        time_left = session.time_left or 0
        self.timer_label.setText(f"{time_left}s")
        self.timer_label.setStyleSheet(Styles.get_timer_style(time_left <= TIMER_URGENT_SECONDS))
        self.counter_label.setText(f"Question {session.index + 1} of {session.question_count}")
        self.question_label.setText(render_question_html(question.question, self._game_font_size))
        self.hint_button.setEnabled(not session.hint_used and not revealed)

        for key, button in self.option_buttons.items():
            value = question.choice(key)
            button.setText(format_choice_label(key, value))
            button.setVisible(key not in session.eliminated_options)
            button.setEnabled(not revealed)
            state = "idle"
            if revealed and value == question.correct_answer:
                state = "correct"
            elif revealed and value == session.selected:
                state = "wrong"
            button.setStyleSheet(Styles.get_option_style(state))

        self.next_button.setVisible(revealed)
        self.next_button.setText(QUIZ_RESULTS_BUTTON if session.is_last_question else QUIZ_NEXT_BUTTON)

"""Component for the matching card game."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QGridLayout, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from arena_app.constants.ui_constants import (
    BACK_BUTTON,
    HINT_BUTTON,
    MATCHING_HINT_TEXT,
    MATCHING_HINT_TITLE,
    MATCHING_INSTRUCTIONS_TEXT,
    MATCHING_INSTRUCTIONS_TITLE,
)
from arena_app.core.services.matching_session import MatchingSession
from arena_app.styling.styles import Styles
from arena_app.ui.dialog_helpers import show_prompt

_COLUMNS = 2


class MatchingPanel(QWidget):
    """Shows the shuffled deck as a grid of flip buttons."""

    def __init__(self, on_back: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back = on_back
        self._session: MatchingSession | None = None
        self._card_buttons: dict[str, QPushButton] = {}
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
        self.hint_button.clicked.connect(
            lambda: show_prompt(self, MATCHING_HINT_TITLE, MATCHING_HINT_TEXT, "Close")
        )
        header.addWidget(self.hint_button)
        layout.addLayout(header)

        self.score_label = QLabel("", self)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.grid = QGridLayout()
        layout.addLayout(self.grid)
        layout.addStretch()

    def bind(self, session: MatchingSession) -> None:
        self._session = session
        self._rebuild_cards()
        self.refresh()
        QTimer.singleShot(0, self._show_instructions)

    def unbind(self) -> None:
        self._session = None

    def _show_instructions(self) -> None:
        session = self._session
        if session is None or not session.is_live:
            return
        show_prompt(self, MATCHING_INSTRUCTIONS_TITLE, MATCHING_INSTRUCTIONS_TEXT, "Start Game")
        if self._session is session:
            session.dismiss_instructions()

    def _rebuild_cards(self) -> None:
        while self.grid.count():
            item = self.grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._card_buttons = {}
        if self._session is None:
            return
        for idx, card in enumerate(self._session.cards):
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, cid=card.id: self._handle_tap(cid))
            self.grid.addWidget(button, idx // _COLUMNS, idx % _COLUMNS)
            self._card_buttons[card.id] = button

    def _handle_tap(self, card_id: str) -> None:
        if self._session is not None:
            self._session.tap_card(card_id)

    def refresh(self) -> None:
        session = self._session
        if session is None:
            return
        self.score_label.setText(f"Pairs: {session.score} / {session.pair_count}")
        for card in session.cards:
            button = self._card_buttons.get(card.id)
            if button is None:
                continue
            if card.id in session.matched:
                button.setText(card.text)
                button.setStyleSheet(Styles.get_card_style("matched"))
                button.setEnabled(False)
            elif session.is_face_up(card.id):
                button.setText(card.text)
                button.setStyleSheet(Styles.get_card_style("revealed"))
                button.setEnabled(True)
            else:
                button.setText("?")
                button.setStyleSheet(Styles.get_card_style("hidden"))
                button.setEnabled(True)

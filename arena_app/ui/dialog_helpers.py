"""Helper functions for common dialog patterns in the game screens."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def show_prompt(
    parent: QWidget,
    title: str,
    message: str,
    accept_label: str,
    cancel_label: str | None = None,
) -> bool:
    """Show a modal instructions/hint prompt.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Prompt text
        accept_label: Text of the confirming button
        cancel_label: Text of the dismissing button, or None for a single button

    Returns:
        True if the user pressed the confirming button
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    accept_button = msg_box.addButton(accept_label, QMessageBox.AcceptRole)
    if cancel_label is not None:
        msg_box.addButton(cancel_label, QMessageBox.RejectRole)
    msg_box.exec()
    return msg_box.clickedButton() is accept_button


def confirm_leave_game(parent: QWidget) -> bool:
    """Ask before abandoning a running game; its score is not saved."""
    reply = QMessageBox.question(
        parent,
        "Leave Game",
        "Leaving now ends this game without saving your score. Continue?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)

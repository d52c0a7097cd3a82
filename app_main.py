"""Application entry point for ArenaQt."""

from __future__ import annotations

import random
import sys

from PySide6.QtWidgets import QApplication

from arena_app.core.api_client import ArenaApiClient
from arena_app.core.game_manager import GameManager
from arena_app.core.services.profile_store import ProfileStore
from arena_app.ui import ArenaMainWindow, QtScheduler
from arena_app.utils.app_settings import AppSettings
from arena_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and settings, then launch the Qt UI."""
    settings = AppSettings.load()
    logger = configure_logging(settings.log_level)
    logger.info("Starting ArenaQt against %s", settings.api_base_url)

    app = QApplication(sys.argv)
    api_client = ArenaApiClient(settings.api_base_url, timeout=settings.request_timeout)
    profile_store = ProfileStore(settings.profile_path)
    if profile_store.load() is None:
        logger.warning("No cached profile at %s; scores will be saved without XP sync", settings.profile_path)

    game_manager = GameManager(
        api_client,
        profile_store,
        scheduler=QtScheduler(app),
        rng=random.Random(settings.shuffle_seed),
    )
    window = ArenaMainWindow(game_manager=game_manager)
    window.show()
    exit_code = app.exec()
    api_client.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

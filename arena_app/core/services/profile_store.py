"""JSON-file backed cache of the signed-in user's profile."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import Lock

from arena_app.core.models import UserProfile

logger = logging.getLogger(__name__)


class ProfileStore:
    """Reads and writes the cached profile record.

    ``add_xp`` is the only place the games change the profile.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = Lock()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> UserProfile | None:
        with self._lock:
            return self._read()

    def save(self, profile: UserProfile) -> None:
        with self._lock:
            self._write(profile)

    def clear(self) -> None:
        with self._lock:
            self._path.unlink(missing_ok=True)

    def add_xp(self, amount: int) -> UserProfile | None:
        """Add ``amount`` to the stored XP. Returns None when no profile is stored."""
        with self._lock:
            profile = self._read()
            if profile is None:
                logger.warning("No cached profile at %s; skipping XP merge", self._path)
                return None
            profile.xp += amount
            self._write(profile)
            logger.info("Merged %d XP into profile %s (now %d)", amount, profile.id, profile.xp)
            return profile

    def _read(self) -> UserProfile | None:
        if not self._path.exists():
            return None
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable profile file %s", self._path)
            return None
        if not isinstance(payload, dict):
            return None
        return UserProfile.from_dict(payload)

    def _write(self, profile: UserProfile) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(profile.to_dict(), indent=2), encoding="utf-8")

"""Runtime settings with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from arena_app.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)


def _default_profile_path() -> Path:
    return Path.home() / ".arena_app" / "user.json"


@dataclass(slots=True)
class AppSettings:
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    profile_path: Path = field(default_factory=_default_profile_path)
    shuffle_seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def load(cls, environ: dict[str, str] | None = None) -> "AppSettings":
        """Construct settings from environment variables when available."""

        env = os.environ if environ is None else environ
        seed = env.get("ARENA_SHUFFLE_SEED", "").strip()
        profile_path = env.get("ARENA_PROFILE_PATH", "").strip()
        return cls(
            api_base_url=env.get("ARENA_API_URL", DEFAULT_API_BASE_URL),
            request_timeout=float(
                env.get("ARENA_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
            ),
            profile_path=Path(profile_path).expanduser() if profile_path else _default_profile_path(),
            shuffle_seed=int(seed) if seed else None,
            log_level=env.get("ARENA_LOG_LEVEL", "INFO").upper(),
        )


__all__ = ["AppSettings"]

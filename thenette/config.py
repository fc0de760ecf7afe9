from __future__ import annotations

"""Runtime settings for thenette, read from the environment.

``settings`` is the live instance consulted by the core; replace its fields
(e.g. with ``monkeypatch.setattr``) to change behaviour at runtime.
"""

import os
from dataclasses import dataclass
from typing import Mapping

__all__ = ["Settings", "settings"]

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:  # noqa: D101 – self-documenting via fields
    log_level: str = "warning"
    emit_events: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``THENETTE_*`` variables in *env* (default ``os.environ``)."""
        env = os.environ if env is None else env
        return cls(
            log_level=env.get("THENETTE_LOG_LEVEL", cls.log_level).lower(),
            emit_events=env.get("THENETTE_EVENTS", "").strip().lower() in _TRUTHY,
        )


settings = Settings.from_env()

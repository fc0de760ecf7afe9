from __future__ import annotations
"""Logging helpers – stdlib logger named ``thenette`` with a Rich handler.

The handler is only attached by :func:`configure` (the CLI calls it); merely
importing thenette leaves logging configuration to the application.
"""
from logging import Formatter, Logger, getLogger, INFO, DEBUG, WARNING, ERROR

from rich.logging import RichHandler

__all__ = ["log", "get", "configure"]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

log: Logger = getLogger("thenette")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the thenette logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("thenette")
    lg.setLevel(lvl)
    return lg


def configure(level: str = "warning") -> Logger:
    """Attach a :class:`RichHandler` to the thenette logger (once) and set *level*."""
    lg = get(level)
    if not any(isinstance(h, RichHandler) for h in lg.handlers):
        handler = RichHandler(rich_tracebacks=True, markup=True, show_path=False)
        handler.setFormatter(Formatter("%(message)s", datefmt="%H:%M:%S"))
        lg.addHandler(handler)
        lg.propagate = False
    return lg

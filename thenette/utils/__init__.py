"""thenette utilities."""

from .logging import log, get, configure

__all__ = [
    "log",
    "get",
    "configure",
]

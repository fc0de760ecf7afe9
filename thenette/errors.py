"""Exceptions raised at the consumer edge of thenette.

Rejections themselves are never wrapped: whatever was passed to
``settle_failure`` (or raised by an executor / continuation) is the rejection
value. These classes only cover misuse and waiting.
"""

from typing import Any

__all__ = [
    "ThenetteError",
    "PendingError",
    "RejectedError",
    "WaitTimeout",
    "ChainingCycleError",
]


class ThenetteError(Exception):
    """Base class for thenette errors."""


class PendingError(ThenetteError):
    """A settled payload was read from a future in another state."""


class RejectedError(ThenetteError):
    """A future was rejected with a value that is not an exception."""

    def __init__(self, reason: Any):
        super().__init__(f"future rejected with {reason!r}")
        self.reason = reason


class WaitTimeout(ThenetteError, TimeoutError):
    """The future did not settle within the consumer's bound."""


class ChainingCycleError(ThenetteError, TypeError):
    """A thenable eventually resolves to itself."""

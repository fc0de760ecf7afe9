from __future__ import annotations
"""Settlement state of a single future.

A *Cell* is the mutable record shared by a future's two settlement
capabilities and by every dependent future that registered a reaction on it.
All reads and writes go through ``cell.lock``.
"""
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional

__all__ = ["State", "Cell", "Reaction"]

Reaction = Callable[[Any], None]


class State(str, Enum):  # noqa: D101
    PENDING = "pending"
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


@dataclass
class Cell:  # noqa: D101 – plain state holder
    fulfill_map: Optional[Callable[[Any], Any]] = None
    reject_map: Optional[Callable[[Any], Any]] = None

    state: State = State.PENDING
    value: Any = None
    error: Any = None

    # True once a settlement has been accepted, possibly before *state* moves
    # (a map may still be running outside the lock).
    claimed: bool = False

    on_success: List[Reaction] = field(default_factory=list)
    on_failure: List[Reaction] = field(default_factory=list)

    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    # ------------------------------------------------------------------ #
    def claim(self) -> bool:
        """Reserve the single settlement slot; False if already taken."""
        with self.lock:
            if self.claimed:
                return False
            self.claimed = True
            return True

    def commit(self, state: State, payload: Any) -> List[Reaction]:
        """Record the outcome and hand back the reactions to run.

        Both reaction lists are cleared; only the list matching *state* is
        returned.
        """
        with self.lock:
            self.state = state
            if state is State.FULFILLED:
                self.value = payload
                reactions = self.on_success
            else:
                self.error = payload
                reactions = self.on_failure
            self.on_success = []
            self.on_failure = []
        return reactions

    def register(self, on_success: Reaction, on_failure: Reaction) -> Optional[Callable[[], None]]:
        """Queue both reactions, or return a thunk firing the right one now.

        Returns None when the reactions were queued (cell still pending).
        """
        with self.lock:
            if self.state is State.PENDING:
                self.on_success.append(on_success)
                self.on_failure.append(on_failure)
                return None
            state, value, error = self.state, self.value, self.error
        if state is State.FULFILLED:
            return lambda: on_success(value)
        return lambda: on_failure(error)

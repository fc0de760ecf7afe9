"""Future state machine and its consumers."""

from .state import State
from .thenable import Thenable
from .result import Result
from .future import Future
from .deferred import Deferred
from .observe import follow, wait

__all__ = [
    "State",
    "Thenable",
    "Result",
    "Future",
    "Deferred",
    "follow",
    "wait",
]

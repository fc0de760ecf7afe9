"""thenette: tiny, synchronous Promises/A+-style futures.

Main components:
* `Future`: single-settlement deferred value with `then` / `catch`
* `Deferred`: producer handle exposing `resolve` / `reject` of a fresh Future
* `Thenable`: the subscription capability consumers flatten on
* `follow` / `wait`: consumer-side flattening of nested thenables
"""

# Version info
__version__ = "0.1.0"

# Core components
from thenette.core.state import State
from thenette.core.thenable import Thenable
from thenette.core.result import Result
from thenette.core.future import Future, Executor
from thenette.core.deferred import Deferred
from thenette.core.observe import follow, wait

from thenette.errors import (
    ThenetteError,
    PendingError,
    RejectedError,
    WaitTimeout,
    ChainingCycleError,
)


# Functional aliases ------------------------------------------------------- #

def create(executor: Executor) -> Future:  # noqa: D401
    """Return a new :class:`Future` driven by *executor*."""
    return Future(executor)


resolve = Future.resolve
reject = Future.reject


__all__ = [
    # Core classes
    "Future",
    "Deferred",
    "Thenable",
    "Result",
    "State",

    # Functions
    "create",
    "resolve",
    "reject",
    "follow",
    "wait",

    # Errors
    "ThenetteError",
    "PendingError",
    "RejectedError",
    "WaitTimeout",
    "ChainingCycleError",
]

from __future__ import annotations

"""Consumer-side flattening of thenables.

The core never unwraps a thenable returned by a continuation; it becomes the
next future's value as is. Consumers that want the innermost outcome use
:func:`follow` (callback style) or :func:`wait` (blocking).
"""

import threading
from typing import Any, Callable, FrozenSet, List, Optional

from thenette.errors import ChainingCycleError, WaitTimeout

from .future import Future
from .result import Result
from .thenable import Thenable

__all__ = ["follow", "wait"]


def follow(
    value: Any,
    on_success: Callable[[Any], Any],
    on_failure: Callable[[Any], Any],
) -> None:
    """Report the flattened outcome of *value* to exactly one callback.

    Plain values go straight to *on_success*. Thenables are subscribed to and
    whatever they fulfil with is followed in turn, so nested futures collapse
    to their innermost outcome. A thenable that leads back to itself fails
    with :class:`ChainingCycleError`.
    """
    _follow(value, on_success, on_failure, frozenset())


def _label(value: Any) -> str:
    # Never repr() here: a thenable may contain itself.
    if isinstance(value, Future):
        return f"future {value._id}"
    return f"{type(value).__name__} object at {id(value):#x}"


def _follow(value: Any, on_success, on_failure, seen: FrozenSet[int]) -> None:
    if not isinstance(value, Thenable):
        on_success(value)
        return
    if id(value) in seen:
        on_failure(ChainingCycleError(f"{_label(value)} resolves to itself"))
        return

    seen = seen | {id(value)}
    value.subscribe(
        lambda inner: _follow(inner, on_success, on_failure, seen),
        on_failure,
    )


def wait(value: Any, timeout: Optional[float] = None) -> Any:
    """Block until *value* flattens, then return it or raise the rejection.

    Exceptions are re-raised as is; other rejection values surface as
    :class:`thenette.errors.RejectedError`. *timeout* bounds this call only,
    the future itself keeps running.
    """
    done = threading.Event()
    box: List[Result[Any]] = []

    def _ok(v: Any) -> None:
        box.append(Result.success(v))
        done.set()

    def _fail(e: Any) -> None:
        box.append(Result.failure(e))
        done.set()

    follow(value, _ok, _fail)

    if not done.wait(timeout):
        raise WaitTimeout(f"{_label(value)} did not settle within {timeout}s")
    return box[0].unwrap()

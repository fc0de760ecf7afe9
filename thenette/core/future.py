from __future__ import annotations

"""Future – a single-settlement deferred value with chainable continuations.

A *Future* is created with an executor that receives two capabilities::

    fut = Future(lambda ok, fail: ok("abc"))
    fut.then(str.upper).catch(lambda err: "fallback")

Settlement is first-wins: whichever capability is called first decides the
outcome, later calls are ignored. Continuations run synchronously, either on
the stack that settles the parent or, when the parent is already settled, on
the stack that calls :meth:`Future.then`.
"""

import itertools
import reprlib
from typing import Any, Callable, Generic, Optional, TypeVar

from thenette.config import settings
from thenette.errors import PendingError
from thenette.utils.events import FutureCreated, FutureSettled, publish
from thenette.utils.logging import log

from .result import Result
from .state import Cell, State
from .thenable import Thenable

__all__ = ["Future", "Executor"]

T = TypeVar("T")

Settle = Callable[[Any], None]
Executor = Callable[[Settle, Settle], Any]

_ids = itertools.count(1)


def _callable_or_none(fn: Any) -> Optional[Callable[[Any], Any]]:
    return fn if callable(fn) else None


class Future(Thenable, Generic[T]):  # noqa: D101
    __slots__ = ("_cell", "_id")

    def __init__(self, executor: Executor) -> None:
        self._start(executor, Cell(), parent=None)

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    @classmethod
    def _bound(
        cls,
        parent: "Future[Any]",
        fulfill_map: Optional[Callable[[Any], Any]],
        reject_map: Optional[Callable[[Any], Any]],
    ) -> "Future[Any]":
        fut = cls.__new__(cls)
        fut._start(parent._register, Cell(fulfill_map=fulfill_map, reject_map=reject_map), parent=parent)
        return fut

    def _start(self, executor: Executor, cell: Cell, parent: "Future[Any] | None") -> None:
        self._cell = cell
        self._id = next(_ids)

        if settings.emit_events:
            publish(FutureCreated(future_id=self._id, parent_id=parent._id if parent else None))

        try:
            executor(self._settle_success, self._settle_failure)
        except Exception as exc:  # noqa: BLE001 – a raising executor rejects
            log.debug("executor of future %d raised %r", self._id, exc)
            self._settle_failure(exc)

    @classmethod
    def resolve(cls, value: Any) -> "Future[Any]":
        """Return a future already fulfilled with *value* (not unwrapped)."""
        return cls(lambda ok, _fail: ok(value))

    @classmethod
    def reject(cls, error: Any) -> "Future[Any]":
        """Return a future already rejected with *error*."""
        return cls(lambda _ok, fail: fail(error))

    # ------------------------------------------------------------------ #
    # Settlement
    # ------------------------------------------------------------------ #

    def _settle_success(self, value: Any) -> None:
        cell = self._cell
        if not cell.claim():
            return
        if cell.fulfill_map is None:
            self._commit(State.FULFILLED, value)
            return
        try:
            mapped = cell.fulfill_map(value)
        except Exception as exc:  # noqa: BLE001
            log.debug("on_fulfilled of future %d raised %r", self._id, exc)
            self._commit(State.REJECTED, exc)
        except BaseException as exc:
            self._commit(State.REJECTED, exc)
            raise
        else:
            self._commit(State.FULFILLED, mapped)

    def _settle_failure(self, error: Any) -> None:
        cell = self._cell
        if not cell.claim():
            return
        if cell.reject_map is None:
            self._commit(State.REJECTED, error)
            return
        try:
            recovered = cell.reject_map(error)
        except Exception as exc:  # noqa: BLE001
            log.debug("on_rejected of future %d raised %r", self._id, exc)
            self._commit(State.REJECTED, exc)
        except BaseException as exc:
            self._commit(State.REJECTED, exc)
            raise
        else:
            self._commit(State.FULFILLED, recovered, recovered=True)

    def _commit(self, state: State, payload: Any, recovered: bool = False) -> None:
        reactions = self._cell.commit(state, payload)
        log.debug(
            "future %d %s%s (%d reaction(s))",
            self._id,
            state.value,
            " after recovery" if recovered else "",
            len(reactions),
        )
        if settings.emit_events:
            publish(FutureSettled(future_id=self._id, state=state.value, recovered=recovered))
        for reaction in reactions:
            reaction(payload)

    # ------------------------------------------------------------------ #
    # Continuations
    # ------------------------------------------------------------------ #

    def _register(self, on_success: Settle, on_failure: Settle) -> None:
        fire_now = self._cell.register(on_success, on_failure)
        if fire_now is not None:
            fire_now()

    def then(
        self,
        on_fulfilled: Optional[Callable[[Any], Any]] = None,
        on_rejected: Optional[Callable[[Any], Any]] = None,
    ) -> "Future[Any]":
        """Return a future settled by feeding this one's outcome through the handlers.

        A missing (or non-callable) handler passes its outcome through
        unchanged. A handler's return value becomes the new future's value as
        is; a raising handler rejects it with the exception.
        """
        return type(self)._bound(self, _callable_or_none(on_fulfilled), _callable_or_none(on_rejected))

    def catch(self, on_rejected: Callable[[Any], Any]) -> "Future[Any]":
        """Shorthand for ``then(None, on_rejected)``."""
        return type(self)._bound(self, None, _callable_or_none(on_rejected))

    def subscribe(self, on_success: Callable[[Any], Any], on_failure: Callable[[Any], Any]) -> None:
        # Routed through ``then`` so a raising subscriber only rejects a
        # throwaway future instead of escaping into the settling stack.
        self.then(on_success, on_failure)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> State:
        with self._cell.lock:
            return self._cell.state

    @property
    def is_pending(self) -> bool:
        return self.state is State.PENDING

    @property
    def is_fulfilled(self) -> bool:
        return self.state is State.FULFILLED

    @property
    def is_rejected(self) -> bool:
        return self.state is State.REJECTED

    @property
    def value(self) -> T:
        """Fulfilment value; raises :class:`PendingError` unless fulfilled."""
        res = self.result()
        if not res.ok:
            raise PendingError(f"future {self._id} is {self.state.value}, not fulfilled")
        return res.value  # type: ignore[return-value]

    @property
    def error(self) -> Any:
        """Rejection value; raises :class:`PendingError` unless rejected."""
        res = self.result()
        if res.ok or res.pending:
            raise PendingError(f"future {self._id} is {self.state.value}, not rejected")
        return res.error

    def result(self) -> Result[T]:
        """Snapshot of the current outcome (no waiting, no flattening)."""
        cell = self._cell
        with cell.lock:
            state, value, error = cell.state, cell.value, cell.error
        if state is State.FULFILLED:
            return Result.success(value)
        if state is State.REJECTED:
            return Result.failure(error)
        return Result.waiting()

    def __await__(self):
        from .aio import to_asyncio

        return to_asyncio(self).__await__()

    @reprlib.recursive_repr()
    def __repr__(self) -> str:  # noqa: D401
        res = self.result()
        if res.pending:
            return f"<Future {self._id} pending>"
        if res.ok:
            return f"<Future {self._id} fulfilled value={res.value!r}>"
        return f"<Future {self._id} rejected error={res.error!r}>"

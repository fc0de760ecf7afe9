from __future__ import annotations

"""asyncio bridges.

``await future`` goes through :func:`to_asyncio`, which flattens nested
thenables the same way :func:`thenette.core.observe.follow` does. Callbacks may
arrive from any thread; results are handed to the loop with
``call_soon_threadsafe``.
"""

import asyncio
from typing import Any, Awaitable, Optional

from thenette.errors import RejectedError

from .future import Future
from .observe import follow
from .thenable import Thenable

__all__ = ["to_asyncio", "from_awaitable"]


def to_asyncio(thenable: Thenable, loop: Optional[asyncio.AbstractEventLoop] = None) -> "asyncio.Future[Any]":
    """Return an asyncio future mirroring the flattened outcome of *thenable*."""
    loop = loop or asyncio.get_running_loop()
    target: asyncio.Future[Any] = loop.create_future()

    def _set_result(value: Any) -> None:
        if not target.done():
            target.set_result(value)

    def _set_exception(error: Any) -> None:
        if not target.done():
            exc = error if isinstance(error, BaseException) else RejectedError(error)
            target.set_exception(exc)

    follow(
        thenable,
        lambda v: loop.call_soon_threadsafe(_set_result, v),
        lambda e: loop.call_soon_threadsafe(_set_exception, e),
    )
    return target


def from_awaitable(awaitable: Awaitable[Any]) -> Future[Any]:
    """Wrap an asyncio future or coroutine as a :class:`Future`.

    Must be called with a running loop when *awaitable* is a coroutine.
    Cancellation surfaces as a rejection with :class:`asyncio.CancelledError`.
    """
    task = asyncio.ensure_future(awaitable)

    def _executor(ok, fail):
        def _done(t: "asyncio.Future[Any]") -> None:
            if t.cancelled():
                fail(asyncio.CancelledError())
            elif t.exception() is not None:
                fail(t.exception())
            else:
                ok(t.result())

        task.add_done_callback(_done)

    return Future(_executor)

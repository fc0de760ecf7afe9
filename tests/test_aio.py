import asyncio
import threading

import pytest

from thenette import Deferred, Future, RejectedError
from thenette.core.aio import from_awaitable, to_asyncio


def _raiser(exc):
    def _fn(_v):
        raise exc

    return _fn


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.mark.anyio
async def test_await_fulfilled():
    assert await Future.resolve("abc") == "abc"


@pytest.mark.anyio
async def test_await_flattens_returned_future():
    fut = Future.reject("BAD").catch(lambda _e: Future.resolve("abc"))
    assert await fut == "abc"


@pytest.mark.anyio
async def test_await_rejection_raises():
    exc = RuntimeError("boom")
    with pytest.raises(RuntimeError) as info:
        await Future.resolve(1).then(_raiser(exc))
    assert info.value is exc

    with pytest.raises(RejectedError):
        await Future.reject("abc")


@pytest.mark.anyio
async def test_await_settled_from_thread():
    d = Deferred()
    threading.Timer(0.05, d.resolve, args=("late",)).start()
    assert await asyncio.wait_for(to_asyncio(d.future), timeout=5) == "late"


@pytest.mark.anyio
async def test_from_awaitable_mirrors_task():
    async def _work():
        await asyncio.sleep(0)
        return 42

    fut = from_awaitable(_work())
    assert fut.is_pending
    assert await fut == 42
    assert fut.value == 42


@pytest.mark.anyio
async def test_from_awaitable_rejects_on_error():
    async def _work():
        raise ValueError("nope")

    fut = from_awaitable(_work())
    with pytest.raises(ValueError):
        await fut
    assert isinstance(fut.error, ValueError)

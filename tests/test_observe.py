import threading

import pytest

from thenette import (
    ChainingCycleError,
    Deferred,
    Future,
    RejectedError,
    Thenable,
    WaitTimeout,
    follow,
    wait,
)


def _later(fn, value, delay=0.1):
    timer = threading.Timer(delay, fn, args=(value,))
    timer.start()
    return timer


def _collect(value):
    out = []
    follow(value, lambda v: out.append(("ok", v)), lambda e: out.append(("fail", e)))
    return out


def test_follow_plain_value():
    assert _collect(5) == [("ok", 5)]


def test_follow_flattens_nested_futures():
    nested = Future.resolve(Future.resolve(Future.resolve("abc")))
    assert _collect(nested) == [("ok", "abc")]


def test_follow_inner_rejection():
    assert _collect(Future.resolve(Future.reject("abc"))) == [("fail", "abc")]


def test_follow_detects_self_resolution():
    d = Deferred()
    d.resolve(d.future)
    [(kind, err)] = _collect(d.future)
    assert kind == "fail"
    assert isinstance(err, ChainingCycleError)
    assert isinstance(err, TypeError)


def test_wait_reports_self_resolution():
    d = Deferred()
    d.resolve(d.future)
    with pytest.raises(ChainingCycleError):
        wait(d.future, timeout=1)


def test_follow_detects_two_future_cycle():
    a, b = Deferred(), Deferred()
    a.resolve(b.future)
    b.resolve(a.future)
    [(kind, err)] = _collect(a.future)
    assert kind == "fail"
    assert isinstance(err, ChainingCycleError)
    assert "<Future" in repr(a.future)


def test_wait_inside_handler_sees_nested_settlement():
    seen = []
    d = Deferred()

    def _handler(v):
        inner = Deferred()
        tail = inner.future.then(lambda x: x * 10)
        inner.resolve(v)
        seen.append(wait(tail, timeout=1))

    d.future.then(_handler)
    d.resolve(3)
    assert seen == [30]


def test_follow_foreign_thenable():
    class Box:
        def __init__(self, v):
            self.v = v

        def subscribe(self, on_success, on_failure):
            on_success(self.v)

    Thenable.register(Box)
    assert _collect(Future.resolve(Box("inner"))) == [("ok", "inner")]


def test_objects_with_then_are_not_thenables():
    class Lookalike:
        def then(self, *a):  # pragma: no cover – must never be called
            raise AssertionError("probed")

    obj = Lookalike()
    assert _collect(obj) == [("ok", obj)]


def test_wait_returns_flattened_value():
    fut = Future.reject("BAD").catch(lambda _e: Future.resolve("abc"))
    assert wait(fut) == "abc"


def test_wait_reraises_exceptions():
    exc = RuntimeError("boom")
    with pytest.raises(RuntimeError) as info:
        wait(Future.reject(exc))
    assert info.value is exc


def test_wait_wraps_plain_rejections():
    with pytest.raises(RejectedError) as info:
        wait(Future.resolve("BAD").then(lambda _v: Future.reject("abc")))
    assert info.value.reason == "abc"


def test_wait_catch_reject_stays_rejected():
    with pytest.raises(RejectedError) as info:
        wait(Future.reject("abc").catch(Future.reject))
    assert info.value.reason == "abc"


def test_wait_resolve_from_timer():
    d = Deferred()
    _later(d.resolve, "abc")
    assert wait(d.future, timeout=5) == "abc"


def test_wait_reject_from_timer():
    d = Deferred()
    _later(d.reject, "abc")
    with pytest.raises(RejectedError):
        wait(d.future, timeout=5)


def test_chain_settled_from_timer_thread():
    d = Deferred()
    fut = d.future.then(lambda v: v.upper())
    _later(d.resolve, "abc", delay=0.05)
    assert wait(fut, timeout=5) == "ABC"
    assert fut.value == "ABC"


def test_wait_timeout():
    with pytest.raises(WaitTimeout):
        wait(Deferred().future, timeout=0.05)

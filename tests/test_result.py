import pytest

from thenette import Deferred, Future, PendingError, RejectedError, Result


def test_result_snapshots():
    assert Future.resolve(1).result() == Result.success(1)
    assert Future.reject("e").result() == Result.failure("e")
    assert Deferred().future.result().pending


def test_unwrap_success():
    assert Result.success("v").unwrap() == "v"


def test_unwrap_exception():
    exc = KeyError("k")
    with pytest.raises(KeyError):
        Result.failure(exc).unwrap()


def test_unwrap_plain_rejection():
    with pytest.raises(RejectedError) as info:
        Result.failure("nope").unwrap()
    assert info.value.reason == "nope"


def test_unwrap_pending():
    with pytest.raises(PendingError):
        Result.waiting().unwrap()


def test_rejected_with_none_is_not_ok():
    res = Future.reject(None).result()
    assert not res.ok and not res.pending
    assert res.error is None

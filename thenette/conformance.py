from __future__ import annotations
"""Built-in behavioural scenarios for :class:`thenette.Future`.

Each scenario builds a future, observes its *flattened* outcome (the way an
awaiting consumer would) and compares it with the expectation. Used by
``thenette check`` / ``thenette trace`` and by the test-suite.
"""
import threading
from typing import Any, Callable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from thenette.core.future import Future
from thenette.core.observe import follow
from thenette.utils.logging import log

__all__ = ["Scenario", "ScenarioReport", "SCENARIOS", "run_scenario", "run_all"]

Outcome = Literal["fulfilled", "rejected", "pending"]


class Scenario(BaseModel):  # noqa: D101
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    build: Callable[[], Any] = Field(exclude=True)
    expect: Outcome
    expected: Any = None


class ScenarioReport(BaseModel):  # noqa: D101
    name: str
    expect: Outcome
    observed: Outcome
    expected_repr: str
    observed_repr: str
    passed: bool


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #

def _boom(*_args):
    raise RuntimeError("boom")


def _bad(*_args):
    raise RuntimeError("BAD")


def _later(value: Any, *, fail: bool = False, delay: float = 0.1) -> Future[Any]:
    def _executor(ok, reject):
        threading.Timer(delay, reject if fail else ok, args=(value,)).start()

    return Future(_executor)


def _first_wins(first: str) -> Future[Any]:
    def _executor(ok, fail):
        if first == "ok":
            ok(123)
            fail(456)
        else:
            fail(123)
            ok(456)

    return Future(_executor)


def _same(a: Any, b: Any) -> bool:
    """Exceptions compare by type and args, everything else by ``==``."""
    if isinstance(a, BaseException) and isinstance(b, BaseException):
        return type(a) is type(b) and a.args == b.args
    return a == b


# --------------------------------------------------------------------------- #
# Scenario table
# --------------------------------------------------------------------------- #

SCENARIOS: List[Scenario] = [
    Scenario(name="resolves", build=lambda: Future(lambda ok, _: ok("abc")), expect="fulfilled", expected="abc"),
    Scenario(name="rejects", build=lambda: Future(lambda _, fail: fail("err")), expect="rejected", expected="err"),
    Scenario(name="only resolves", build=lambda: _first_wins("ok"), expect="fulfilled", expected=123),
    Scenario(name="only rejects", build=lambda: _first_wins("fail"), expect="rejected", expected=123),
    Scenario(name="error rejects", build=lambda: Future(_boom), expect="rejected", expected=RuntimeError("boom")),
    Scenario(
        name="rejects then resolves",
        build=lambda: Future(lambda _, fail: fail("BAD")).catch(lambda _e: "ok"),
        expect="fulfilled",
        expected="ok",
    ),
    Scenario(
        name="then raising rejects",
        build=lambda: Future(lambda ok, _: ok("v1")).then(_boom),
        expect="rejected",
        expected=RuntimeError("boom"),
    ),
    Scenario(
        name="catch observes then raising",
        build=lambda: Future(lambda ok, _: ok("v1")).then(_boom).catch(lambda e: f"caught {e}"),
        expect="fulfilled",
        expected="caught boom",
    ),
    Scenario(
        name="resolves twice",
        build=lambda: Future(lambda ok, _: ok("abc")).then(lambda x: x),
        expect="fulfilled",
        expected="abc",
    ),
    Scenario(
        name="resolve does not reject",
        build=lambda: Future(lambda ok, _: ok("abc")).catch(_bad),
        expect="fulfilled",
        expected="abc",
    ),
    Scenario(
        name="reject does not resolve",
        build=lambda: Future(lambda _, fail: fail("abc")).then(_bad),
        expect="rejected",
        expected="abc",
    ),
    Scenario(name="resolves later", build=lambda: _later("abc"), expect="fulfilled", expected="abc"),
    Scenario(name="rejects later", build=lambda: _later("abc", fail=True), expect="rejected", expected="abc"),
    Scenario(name="static resolve", build=lambda: Future.resolve("abc"), expect="fulfilled", expected="abc"),
    Scenario(name="static reject", build=lambda: Future.reject("abc"), expect="rejected", expected="abc"),
    Scenario(
        name="catch returns resolved future",
        build=lambda: Future(lambda _, fail: fail("BAD")).catch(lambda _e: Future.resolve("abc")),
        expect="fulfilled",
        expected="abc",
    ),
    Scenario(
        name="catch returns rejected future",
        build=lambda: Future(lambda _, fail: fail("abc")).catch(Future.reject),
        expect="rejected",
        expected="abc",
    ),
    Scenario(
        name="then returns rejected future",
        build=lambda: Future(lambda ok, _: ok("BAD")).then(lambda _v: Future.reject("abc")),
        expect="rejected",
        expected="abc",
    ),
]


# --------------------------------------------------------------------------- #
# Runner
# --------------------------------------------------------------------------- #

def run_scenario(scenario: Scenario, timeout: float = 2.0) -> ScenarioReport:
    """Build *scenario*, wait up to *timeout* seconds and compare outcomes."""
    done = threading.Event()
    seen: dict = {}

    def _on(kind: Outcome):
        def _record(payload: Any) -> None:
            seen.setdefault("outcome", (kind, payload))
            done.set()

        return _record

    try:
        follow(scenario.build(), _on("fulfilled"), _on("rejected"))
    except Exception as exc:  # noqa: BLE001 – a broken builder is a failed scenario
        log.warning("scenario %r failed to build: %s", scenario.name, exc)
        seen["outcome"] = ("rejected", exc)
        done.set()

    observed: Outcome = "pending"
    payload: Optional[Any] = None
    if done.wait(timeout):
        observed, payload = seen["outcome"]

    passed = observed == scenario.expect and _same(payload, scenario.expected)
    return ScenarioReport(
        name=scenario.name,
        expect=scenario.expect,
        observed=observed,
        expected_repr=repr(scenario.expected),
        observed_repr=repr(payload),
        passed=passed,
    )


def run_all(scenarios: List[Scenario] | None = None, timeout: float = 2.0) -> List[ScenarioReport]:
    return [run_scenario(s, timeout=timeout) for s in (scenarios if scenarios is not None else SCENARIOS)]

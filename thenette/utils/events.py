from __future__ import annotations
"""Ultra-lightweight pub/sub bus for future lifecycle events.

Events are only published while ``settings.emit_events`` is on.

Example
-------
```python
from thenette.utils.events import subscribe, FutureSettled

@subscribe(FutureSettled)
def _on_settled(evt: FutureSettled):
    print(f"future {evt.future_id} -> {evt.state}")
```
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

__all__ = [
    "Event",
    "FutureCreated",
    "FutureSettled",
    "subscribe",
    "unsubscribe",
    "publish",
]

T = TypeVar("T", bound="Event")
_Handler = Callable[[Any], None]
_REGISTRY: Dict[Type["Event"], List[_Handler]] = {}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, kw_only=True)
class Event:  # noqa: D101 – base event
    ts: datetime = field(default_factory=_now)


# --------------------------------------------------------------------------- #
# Concrete events
# --------------------------------------------------------------------------- #
@dataclass(slots=True)
class FutureCreated(Event):
    future_id: int
    parent_id: Optional[int] = None


@dataclass(slots=True)
class FutureSettled(Event):
    future_id: int
    state: str
    recovered: bool = False  # a reject_map turned a failure into fulfilment


# --------------------------------------------------------------------------- #
# API helpers
# --------------------------------------------------------------------------- #

def subscribe(event_type: Type[T]):  # noqa: D401
    """Decorator: register *func* to receive *event_type* events."""

    def _decorator(func: _Handler) -> _Handler:
        _REGISTRY.setdefault(event_type, []).append(func)
        return func

    return _decorator


def unsubscribe(event_type: Type[Event], func: _Handler) -> None:
    handlers = _REGISTRY.get(event_type, [])
    if func in handlers:
        handlers.remove(func)


def publish(evt: Event) -> None:  # noqa: D401
    """Publish an event to all registered subscribers."""
    for func in list(_REGISTRY.get(type(evt), [])):
        try:
            func(evt)
        except Exception as e:  # noqa: BLE001
            # A broken observer must never break settlement.
            from thenette.utils.logging import log

            log.warning("event handler %s failed: %s", getattr(func, "__name__", func), e)

from __future__ import annotations

"""Deferred – settle a pending Future from outside its executor."""

from typing import Any

from .future import Future, Settle

__all__ = ["Deferred"]


class Deferred:  # noqa: D101
    future: Future[Any]
    resolve: Settle
    reject: Settle

    def __init__(self) -> None:
        # The executor runs synchronously, so both capabilities are bound
        # before __init__ returns.
        self.future = Future(self._capture)

    def _capture(self, resolve: Settle, reject: Settle) -> None:
        self.resolve = resolve
        self.reject = reject

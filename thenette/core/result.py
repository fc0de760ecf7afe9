from __future__ import annotations
"""Minimal Result dataclass capturing a future's outcome at one instant.

A snapshot, not a live view: it never waits and never flattens.
"""
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from thenette.errors import PendingError, RejectedError

T = TypeVar("T")

__all__ = ["Result"]


@dataclass(slots=True, frozen=True)
class Result(Generic[T]):  # noqa: D101
    value: Optional[T] = None
    error: Any = None
    ok: bool = False
    pending: bool = False

    # Convenience constructors ----------------------------------------- #
    @staticmethod
    def success(val: T) -> "Result[T]":  # noqa: D401
        return Result(value=val, ok=True)

    @staticmethod
    def failure(err: Any) -> "Result[Any]":  # noqa: D401
        return Result(error=err)

    @staticmethod
    def waiting() -> "Result[Any]":  # noqa: D401
        return Result(pending=True)

    # ------------------------------------------------------------------ #
    def unwrap(self) -> T:  # noqa: D401
        """Return *value* or raise the rejection (Rust-like)."""
        if self.pending:
            raise PendingError("future has not settled yet")
        if not self.ok:
            if isinstance(self.error, BaseException):
                raise self.error
            raise RejectedError(self.error)
        return self.value  # type: ignore[return-value]

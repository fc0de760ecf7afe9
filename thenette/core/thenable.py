from __future__ import annotations

"""The subscription capability shared by every future-shaped object."""

from abc import ABC, abstractmethod
from typing import Any, Callable

__all__ = ["Thenable"]


class Thenable(ABC):
    """Anything a consumer may subscribe to for an eventual outcome.

    Implementations call exactly one of the two callbacks, at most once.
    Foreign types join by subclassing, or by ``Thenable.register(cls)`` when
    they already provide a compatible ``subscribe``.
    """

    __slots__ = ()

    @abstractmethod
    def subscribe(
        self,
        on_success: Callable[[Any], Any],
        on_failure: Callable[[Any], Any],
    ) -> None:
        raise NotImplementedError

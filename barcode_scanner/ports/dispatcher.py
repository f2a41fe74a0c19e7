from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

T = TypeVar("T")


class TaskDispatcher(ABC):
    @abstractmethod
    def dispatch(
            self,
            work: Callable[[], T],
            on_done: Callable[[T], None],
            on_error: Callable[[BaseException], None],
    ) -> None:
        """Run work off the session context; deliver its result back into it."""
        raise NotImplementedError

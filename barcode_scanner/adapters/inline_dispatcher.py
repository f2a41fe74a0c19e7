from __future__ import annotations

from typing import Callable, TypeVar

from barcode_scanner.ports.dispatcher import TaskDispatcher

T = TypeVar("T")


class InlineTaskDispatcher(TaskDispatcher):
    """Runs work synchronously on the caller's thread (headless use and tests)."""

    def dispatch(
            self,
            work: Callable[[], T],
            on_done: Callable[[T], None],
            on_error: Callable[[BaseException], None],
    ) -> None:
        try:
            result = work()
        except Exception as e:
            on_error(e)
            return
        on_done(result)

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from barcode_scanner.domain.history import HistoryStore
from barcode_scanner.domain.models import HistoryEntry, Idle, ScanOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    outcome: ScanOutcome
    history: Tuple[HistoryEntry, ...]


SessionListener = Callable[[SessionSnapshot], None]


class SessionStore:
    """
    Observable session state: the current scan outcome plus the history log.

    Only the submitter writes here. complete() applies an outcome and its
    history entry under one lock and notifies once, so observers never see
    one without the other.
    """

    def __init__(self, history: Optional[HistoryStore] = None) -> None:
        self._outcome: ScanOutcome = Idle()
        self._history = history if history is not None else HistoryStore()
        self._lock = threading.RLock()
        self._listeners: List[SessionListener] = []

    @property
    def outcome(self) -> ScanOutcome:
        with self._lock:
            return self._outcome

    @property
    def history(self) -> HistoryStore:
        return self._history

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(outcome=self._outcome, history=self._history.all())

    def publish(self, outcome: ScanOutcome) -> None:
        with self._lock:
            self._outcome = outcome
            snap = SessionSnapshot(outcome=outcome, history=self._history.all())
        self._notify(snap)

    def complete(self, outcome: ScanOutcome, entry: HistoryEntry) -> None:
        with self._lock:
            self._outcome = outcome
            self._history.append(entry)
            snap = SessionSnapshot(outcome=outcome, history=self._history.all())
        self._notify(snap)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, snap: SessionSnapshot) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(snap)

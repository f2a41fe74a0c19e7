from __future__ import annotations

import threading
from typing import Iterator, List, Tuple

from barcode_scanner.domain.models import HistoryEntry


class HistoryStore:
    """
    Session log of completed submissions, newest first.

    Append-only: entries are never removed or deduplicated. Appends are
    serialized so overlapping completions cannot interleave.
    """

    def __init__(self) -> None:
        self._entries: List[HistoryEntry] = []
        self._lock = threading.Lock()

    def append(self, entry: HistoryEntry) -> None:
        with self._lock:
            self._entries.insert(0, entry)

    def all(self) -> Tuple[HistoryEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.all())

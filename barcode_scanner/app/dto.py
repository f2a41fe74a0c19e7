from __future__ import annotations

from dataclasses import dataclass

from barcode_scanner.domain.models import HistoryEntry, ScanOutcome


@dataclass(frozen=True)
class SubmissionResult:
    """Terminal outcome of one request attempt and the history entry it produces."""

    outcome: ScanOutcome
    entry: HistoryEntry

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from barcode_scanner.app.controller import status_text
from barcode_scanner.app.session import SessionSnapshot
from barcode_scanner.domain.models import HistoryEntry, Idle, Loading


@dataclass
class ScanViewState:
    history: Tuple[HistoryEntry, ...] = ()
    status: str = "Scanning barcode"
    is_busy: bool = False
    last_code: Optional[str] = None

    @classmethod
    def from_snapshot(cls, snap: SessionSnapshot) -> "ScanViewState":
        outcome = snap.outcome
        return cls(
            history=snap.history,
            status=status_text(outcome),
            is_busy=isinstance(outcome, Loading),
            last_code=None if isinstance(outcome, Idle) else outcome.code,
        )

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from barcode_scanner.app.session import SessionStore
from barcode_scanner.app.use_cases import ScanSubmitter
from barcode_scanner.domain.models import Failure, Loading, ScanOutcome, Success
from barcode_scanner.ports.scan_source import ScanEventSource

logger = logging.getLogger(__name__)

STATUS_SCANNING = "Scanning barcode"
STATUS_SUBMITTING = "Submitting..."


def status_text(outcome: ScanOutcome) -> str:
    if isinstance(outcome, Loading):
        return STATUS_SUBMITTING
    if isinstance(outcome, Success):
        return f"Added: {outcome.article_name}"
    if isinstance(outcome, Failure):
        return outcome.message
    return STATUS_SCANNING


class ScanSessionController:
    """
    Bridges recognized-code events to the submitter.

    A barcode left in front of the camera is reported on every frame, so:
      - the code most recently submitted is ignored until a different code
        has been submitted or rearm() is called;
      - while a submission is in flight every other code is dropped, not queued.
    A code refused before the request (server not configured) is not armed,
    but it still counts as a different code: the previous one may be
    submitted again afterwards.
    """

    def __init__(self, submitter: ScanSubmitter, store: SessionStore) -> None:
        self._submitter = submitter
        self._store = store
        self._last_code: Optional[str] = None
        self._detach: List[Callable[[], None]] = []

    @property
    def last_code(self) -> Optional[str]:
        return self._last_code

    @property
    def status_text(self) -> str:
        return status_text(self._store.outcome)

    @property
    def is_loading(self) -> bool:
        return isinstance(self._store.outcome, Loading)

    def on_recognized(self, code: str) -> bool:
        if not code:
            return False

        outcome = self._store.outcome
        if isinstance(outcome, Loading):
            if outcome.code != code:
                logger.info("Dropping %s: submission of %s in progress", code, outcome.code)
            return False

        if code == self._last_code:
            return False

        started = self._submitter.submit(code)
        if started:
            self._last_code = code
        elif self._last_code is not None:
            # A different code was seen, even though it was refused.
            self._last_code = None
        return started

    def rearm(self) -> None:
        """Allow the last code to be submitted again (explicit user action)."""
        logger.debug("Rearmed, last code was %s", self._last_code)
        self._last_code = None

    def attach(self, source: ScanEventSource) -> None:
        self._detach.append(source.subscribe(self.on_recognized))

    def detach_all(self) -> None:
        while self._detach:
            self._detach.pop()()


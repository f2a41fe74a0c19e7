from __future__ import annotations

import logging
from typing import Callable, List

from barcode_scanner.domain.camera_access import (
    STATUS_MESSAGES,
    AccessStatus,
    Authorization,
    resolve_access_status,
)
from barcode_scanner.ports.camera import CameraAccessProvider

logger = logging.getLogger(__name__)

StatusListener = Callable[[AccessStatus], None]


class CameraAccessNegotiator:
    """
    Tracks whether the camera scanner may be used.

    Queried once by start() and again only through refresh() (user action).
    An undetermined authorization triggers one OS access request; its answer
    settles the status.
    """

    def __init__(self, provider: CameraAccessProvider) -> None:
        self._provider = provider
        self._status = AccessStatus.UNKNOWN
        self._listeners: List[StatusListener] = []
        self._request_pending = False

    @property
    def status(self) -> AccessStatus:
        return self._status

    @property
    def message(self) -> str:
        return STATUS_MESSAGES[self._status]

    def subscribe(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def start(self) -> AccessStatus:
        return self._query()

    def refresh(self) -> AccessStatus:
        return self._query()

    def _query(self) -> AccessStatus:
        present = self._provider.camera_present()
        authorization = self._provider.authorization() if present else Authorization.NOT_DETERMINED
        supported = self._provider.scanner_supported() if present else False

        self._set(resolve_access_status(present, authorization, supported))

        if present and authorization == Authorization.NOT_DETERMINED and not self._request_pending:
            self._request_pending = True
            self._provider.request_access(self._on_access_answer)
        return self._status

    def _on_access_answer(self, granted: bool) -> None:
        self._request_pending = False
        authorization = Authorization.AUTHORIZED if granted else Authorization.DENIED
        status = resolve_access_status(True, authorization, self._provider.scanner_supported())
        logger.info("Camera access %s", "granted" if granted else "refused")
        self._set(status)

    def _set(self, status: AccessStatus) -> None:
        if status == self._status:
            return
        self._status = status
        for listener in list(self._listeners):
            listener(status)

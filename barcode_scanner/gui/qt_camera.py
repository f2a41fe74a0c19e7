from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QCameraPermission, QCoreApplication, Qt
from PySide6.QtMultimedia import QMediaDevices

from barcode_scanner.domain.camera_access import Authorization
from barcode_scanner.ports.camera import CameraAccessProvider

logger = logging.getLogger(__name__)

_AUTHORIZATION = {
    Qt.PermissionStatus.Undetermined: Authorization.NOT_DETERMINED,
    Qt.PermissionStatus.Granted: Authorization.AUTHORIZED,
    Qt.PermissionStatus.Denied: Authorization.DENIED,
}


class QtCameraAccessProvider(CameraAccessProvider):
    """
    Camera availability and permission as reported by Qt.

    Barcode decoding is done by an external scan capability; scanner_supported
    only reflects whether one was plugged in.
    """

    def __init__(self, *, scanner_supported: bool = False) -> None:
        self._scanner_supported = scanner_supported

    def camera_present(self) -> bool:
        return bool(QMediaDevices.videoInputs())

    def authorization(self) -> Authorization:
        status = QCoreApplication.instance().checkPermission(QCameraPermission())
        return _AUTHORIZATION.get(status, Authorization.RESTRICTED)

    def scanner_supported(self) -> bool:
        return self._scanner_supported

    def request_access(self, on_result: Callable[[bool], None]) -> None:
        app = QCoreApplication.instance()

        def _answered(_permission) -> None:
            granted = app.checkPermission(QCameraPermission()) == Qt.PermissionStatus.Granted
            logger.debug("Camera permission answered: %s", granted)
            on_result(granted)

        app.requestPermission(QCameraPermission(), app, _answered)

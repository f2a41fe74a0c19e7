from __future__ import annotations

from typing import Callable

from barcode_scanner.domain.camera_access import Authorization
from barcode_scanner.ports.camera import CameraAccessProvider


class NullCameraAccessProvider(CameraAccessProvider):
    """
    Stub provider for hosts without camera integration.
    Reports a fixed device state; access requests are answered immediately.
    """

    def __init__(
            self,
            *,
            present: bool = False,
            authorization: Authorization = Authorization.AUTHORIZED,
            supported: bool = True,
            grant: bool = True,
    ) -> None:
        self._present = present
        self._authorization = authorization
        self._supported = supported
        self._grant = grant

    def camera_present(self) -> bool:
        return self._present

    def authorization(self) -> Authorization:
        return self._authorization

    def scanner_supported(self) -> bool:
        return self._supported

    def request_access(self, on_result: Callable[[bool], None]) -> None:
        self._authorization = Authorization.AUTHORIZED if self._grant else Authorization.DENIED
        on_result(self._grant)

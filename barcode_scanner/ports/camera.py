from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from barcode_scanner.domain.camera_access import Authorization


class CameraAccessProvider(ABC):
    @abstractmethod
    def camera_present(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def authorization(self) -> Authorization:
        raise NotImplementedError

    @abstractmethod
    def scanner_supported(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def request_access(self, on_result: Callable[[bool], None]) -> None:
        """Ask the OS for camera access; on_result receives whether it was granted."""
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass

from barcode_scanner.app.camera_access import CameraAccessNegotiator
from barcode_scanner.app.controller import ScanSessionController
from barcode_scanner.app.session import SessionStore
from barcode_scanner.app.use_cases import ScanSubmitter
from barcode_scanner.config.settings import Settings
from barcode_scanner.ports.config_store import ServerConfigRepository


@dataclass(frozen=True)
class AppServices:
    store: SessionStore
    submitter: ScanSubmitter
    controller: ScanSessionController
    camera_access: CameraAccessNegotiator
    config_repo: ServerConfigRepository
    settings: Settings

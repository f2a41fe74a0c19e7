from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from barcode_scanner.adapters.json_config_store import JsonServerConfigStore
from barcode_scanner.adapters.requests_transport import RequestsSubmissionTransport
from barcode_scanner.app.camera_access import CameraAccessNegotiator
from barcode_scanner.app.controller import ScanSessionController
from barcode_scanner.app.services import AppServices
from barcode_scanner.app.session import SessionStore
from barcode_scanner.app.use_cases import ScanSubmitter
from barcode_scanner.config.settings import Settings
from barcode_scanner.gui.main_window import MainWindow
from barcode_scanner.gui.qt_camera import QtCameraAccessProvider
from barcode_scanner.gui.qt_dispatcher import QtTaskDispatcher


def build_app(
        settings: Settings,
        app: QApplication,
) -> tuple[MainWindow, QtTaskDispatcher, RequestsSubmissionTransport]:
    # Ports/adapters
    config_repo = JsonServerConfigStore(settings.config_path, default_port=settings.default_port)
    transport = RequestsSubmissionTransport()
    dispatcher = QtTaskDispatcher(parent=app)

    # Session state + use case
    store = SessionStore()
    submitter = ScanSubmitter(
        store=store,
        config_repo=config_repo,
        transport=transport,
        dispatcher=dispatcher,
        settings=settings,
    )
    controller = ScanSessionController(submitter, store)

    camera_access = CameraAccessNegotiator(QtCameraAccessProvider())

    services = AppServices(
        store=store,
        submitter=submitter,
        controller=controller,
        camera_access=camera_access,
        config_repo=config_repo,
        settings=settings,
    )

    # GUI
    window = MainWindow(services=services)
    camera_access.start()
    return window, dispatcher, transport


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Scan barcodes and submit them to the product server.")
    p.add_argument("--config", default=None, help="Server address file (default: ~/.barcode_scanner/server.json).")
    p.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (default: 10).")
    p.add_argument("--log-level", default="INFO", help="Logging level (DEBUG/INFO/WARNING/ERROR).")
    return p


def main() -> int:
    args, qt_args = build_arg_parser().parse_known_args()

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    settings = Settings()
    if args.config:
        settings = dataclasses.replace(settings, config_path=Path(args.config).expanduser())
    if args.timeout is not None:
        settings = dataclasses.replace(settings, request_timeout_seconds=args.timeout)

    app = QApplication([sys.argv[0], *qt_args])
    window, dispatcher, transport = build_app(settings, app)
    window.resize(520, 640)
    window.show()
    try:
        return app.exec()
    finally:
        dispatcher.shutdown()
        transport.close()


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListView,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from barcode_scanner.app.services import AppServices
from barcode_scanner.app.session import SessionSnapshot
from barcode_scanner.domain.camera_access import AccessStatus
from barcode_scanner.gui.history_model import HistoryListModel
from barcode_scanner.gui.scan_input import KeyboardWedgeScanSource
from barcode_scanner.gui.settings_dialog import ServerSettingsDialog
from barcode_scanner.gui.view_models import ScanViewState

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, services: AppServices) -> None:
        super().__init__()
        self._services = services
        self._state = ScanViewState.from_snapshot(services.store.snapshot())

        self.setWindowTitle(services.settings.window_title)

        root = QWidget()
        self.setCentralWidget(root)

        # Header: status text + settings
        self._status = QLabel()
        self._status.setStyleSheet("font-size: 15px; font-weight: 600;")
        self._status.setWordWrap(True)

        self._settings_btn = QPushButton("Settings")
        self._settings_btn.clicked.connect(self._on_settings)

        self._rearm_btn = QPushButton("Scan again")
        self._rearm_btn.setToolTip("Allow the last barcode to be submitted again")
        self._rearm_btn.clicked.connect(self._services.controller.rearm)

        header = QHBoxLayout()
        header.addWidget(self._status, 1)
        header.addWidget(self._rearm_btn)
        header.addWidget(self._settings_btn)

        self._busy = QProgressBar()
        self._busy.setRange(0, 0)  # indeterminate
        self._busy.setTextVisible(False)
        self._busy.setMaximumHeight(6)

        # Camera access
        self._camera = QLabel()
        self._camera.setStyleSheet("color: gray;")
        self._camera_btn = QPushButton("Check camera")
        self._camera_btn.clicked.connect(self._services.camera_access.refresh)

        camera_row = QHBoxLayout()
        camera_row.addWidget(self._camera, 1)
        camera_row.addWidget(self._camera_btn)

        # Keyboard-wedge scanners type into this field and press Enter.
        self._scan_field = QLineEdit()
        self._scan_field.setPlaceholderText("Scan or type a barcode, then press Enter")
        self._scan_source = KeyboardWedgeScanSource(self._scan_field)
        self._services.controller.attach(self._scan_source)

        self._code = QLabel()
        self._code.setStyleSheet("color: gray; font-size: 11px;")

        self._history_model = HistoryListModel()
        self._history = QListView()
        self._history.setModel(self._history_model)
        self._history.setUniformItemSizes(True)

        layout = QVBoxLayout(root)
        layout.addLayout(header)
        layout.addWidget(self._busy)
        layout.addLayout(camera_row)
        layout.addWidget(self._scan_field)
        layout.addWidget(self._code)
        layout.addWidget(QLabel("History"))
        layout.addWidget(self._history, 1)

        self._unsubscribe = services.store.subscribe(self._on_session_changed)
        services.camera_access.subscribe(self._on_camera_status)

        self._render()
        self._on_camera_status(services.camera_access.status)
        self._scan_field.setFocus(Qt.OtherFocusReason)

    def _on_session_changed(self, snap: SessionSnapshot) -> None:
        self._state = ScanViewState.from_snapshot(snap)
        self._render()

    def _render(self) -> None:
        s = self._state
        self._status.setText(s.status)
        self._busy.setVisible(s.is_busy)
        self._code.setText(f"Code: {s.last_code}" if s.last_code else "")
        self._history_model.set_entries(s.history)

    def _on_camera_status(self, status: AccessStatus) -> None:
        self._camera.setText(self._services.camera_access.message)
        self._camera_btn.setVisible(status != AccessStatus.AVAILABLE)

    def _on_settings(self) -> None:
        repo = self._services.config_repo
        dialog = ServerSettingsDialog(repo.load(), self._services.settings.submit_path, parent=self)
        if dialog.exec():
            config = dialog.config()
            repo.save(config)
            logger.info("Server set to %s:%s", config.host, config.port)
        self._scan_field.setFocus(Qt.OtherFocusReason)

    def closeEvent(self, event) -> None:  # pragma: no cover - Qt event
        self._unsubscribe()
        self._services.controller.detach_all()
        super().closeEvent(event)

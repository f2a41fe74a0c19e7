from __future__ import annotations

from PySide6.QtGui import QIntValidator
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from barcode_scanner.domain.errors import ConfigError
from barcode_scanner.domain.models import ServerConfig


class ServerSettingsDialog(QDialog):
    def __init__(self, config: ServerConfig, submit_path: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(360)
        self._submit_path = submit_path

        self._host = QLineEdit(config.host)
        self._host.setPlaceholderText("e.g. 192.168.1.5")

        self._port = QLineEdit(config.port)
        self._port.setValidator(QIntValidator(1, 65535, self))

        self._preview = QLabel()
        self._preview.setStyleSheet("color: gray;")
        self._host.textChanged.connect(self._update_preview)
        self._port.textChanged.connect(self._update_preview)

        form = QFormLayout()
        form.addRow("IP address", self._host)
        form.addRow("Port", self._port)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        title = QLabel("Server configuration")
        title.setStyleSheet("font-size: 14px; font-weight: 600;")

        layout = QVBoxLayout(self)
        layout.addWidget(title)
        layout.addLayout(form)
        layout.addWidget(self._preview)
        layout.addWidget(buttons)

        self._update_preview()

    def config(self) -> ServerConfig:
        return ServerConfig(host=self._host.text().strip(), port=self._port.text().strip())

    def _update_preview(self) -> None:
        try:
            self._preview.setText(self.config().validate(self._submit_path).url)
        except ConfigError as e:
            self._preview.setText(str(e))

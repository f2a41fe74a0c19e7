from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from barcode_scanner.domain.models import DEFAULT_PORT, SUBMIT_PATH


def _default_config_path() -> Path:
    return Path.home() / ".barcode_scanner" / "server.json"


@dataclass(frozen=True)
class Settings:
    # Server endpoint
    submit_path: str = SUBMIT_PATH
    default_port: str = DEFAULT_PORT
    request_timeout_seconds: float = 10.0

    # Persisted server address (host/port), edited from the settings dialog
    config_path: Path = field(default_factory=_default_config_path)

    window_title: str = "Barcode Scanner"

from __future__ import annotations

from dataclasses import replace

from barcode_scanner.domain.models import DEFAULT_PORT, ServerConfig
from barcode_scanner.ports.config_store import ServerConfigRepository


class InMemoryServerConfigStore(ServerConfigRepository):
    """Keeps the server address for the lifetime of the process only."""

    def __init__(self, host: str = "", port: str = DEFAULT_PORT) -> None:
        self._config = ServerConfig(host=host, port=port)

    def load(self) -> ServerConfig:
        return replace(self._config)

    def save(self, config: ServerConfig) -> None:
        self._config = replace(config)

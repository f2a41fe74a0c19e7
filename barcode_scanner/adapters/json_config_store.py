from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from barcode_scanner.domain.models import DEFAULT_PORT, ServerConfig
from barcode_scanner.ports.config_store import ServerConfigRepository

logger = logging.getLogger(__name__)


@dataclass
class JsonServerConfigStore(ServerConfigRepository):
    """
    Server address persistence.

    Disk format: {"host": "...", "port": "..."}.
    A missing or unreadable file yields an unconfigured ServerConfig;
    a missing port falls back to the default.
    """

    path: Path
    default_port: str = DEFAULT_PORT

    def load(self) -> ServerConfig:
        if not self.path.exists():
            return ServerConfig(host="", port=self.default_port)

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable server config %s: %s", self.path, e)
            return ServerConfig(host="", port=self.default_port)

        if not isinstance(data, dict):
            logger.warning("Ignoring server config %s: expected an object", self.path)
            return ServerConfig(host="", port=self.default_port)

        host = data.get("host")
        port = data.get("port")
        return ServerConfig(
            host=str(host) if host is not None else "",
            port=str(port) if port not in (None, "") else self.default_port,
        )

    def save(self, config: ServerConfig) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(asdict(config), indent=2) + "\n", encoding="utf-8")

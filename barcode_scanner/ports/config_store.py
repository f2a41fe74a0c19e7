from __future__ import annotations

from abc import ABC, abstractmethod

from barcode_scanner.domain.models import ServerConfig


class ServerConfigRepository(ABC):
    @abstractmethod
    def load(self) -> ServerConfig:
        raise NotImplementedError

    @abstractmethod
    def save(self, config: ServerConfig) -> None:
        raise NotImplementedError

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

RecognizedCallback = Callable[[str], None]
Unsubscribe = Callable[[], None]


class ScanEventSource(ABC):
    @abstractmethod
    def subscribe(self, callback: RecognizedCallback) -> Unsubscribe:
        """Call callback once per decodable recognized item."""
        raise NotImplementedError

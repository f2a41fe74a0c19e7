from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class SubmissionTransport(ABC):
    @abstractmethod
    def post_json(self, url: str, payload: Dict[str, Any], timeout: float) -> bytes:
        """POST payload as JSON and return the raw response body.

        Raises TransportError when no response could be obtained.
        """
        raise NotImplementedError

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests

from barcode_scanner.domain.errors import TransportError
from barcode_scanner.ports.transport import SubmissionTransport

logger = logging.getLogger(__name__)


class RequestsSubmissionTransport(SubmissionTransport):
    """
    HTTP adapter (via requests).

    HTTP status codes are not interpreted: the server reports "not found"
    in the JSON body, so whatever body comes back is handed to the decoder.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session or requests.Session()

    def post_json(self, url: str, payload: Dict[str, Any], timeout: float) -> bytes:
        body = json.dumps(payload).encode("utf-8")
        try:
            response = self._session.post(
                url,
                data=body,
                headers={"Content-Type": "application/json"},
                timeout=timeout,
            )
        except requests.RequestException as e:
            logger.warning("POST %s failed: %s", url, e)
            raise TransportError(str(e)) from e

        logger.debug("POST %s -> %s (%d bytes)", url, response.status_code, len(response.content))
        return response.content

    def close(self) -> None:
        self._session.close()

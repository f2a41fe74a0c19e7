from __future__ import annotations

import ipaddress
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Union
from urllib.parse import urlsplit

from barcode_scanner.domain.errors import InvalidEndpointError, MissingHostError

SUBMIT_PATH = "/addProductByBarcode"
DEFAULT_PORT = "3000"


@dataclass(frozen=True)
class Endpoint:
    url: str

    def __str__(self) -> str:
        return self.url


@dataclass
class ServerConfig:
    """
    Destination of scan submissions, as typed by the user.

    Both fields are kept as raw strings; nothing is checked until validate()
    is called at submission time.
    """

    host: str = ""
    port: str = DEFAULT_PORT

    def validate(self, path: str = SUBMIT_PATH) -> Endpoint:
        host = self.host.strip()
        port = self.port.strip() or DEFAULT_PORT

        if not host:
            raise MissingHostError("server host is not configured")

        if host.startswith("[") and host.endswith("]"):
            if not _is_ipv6(host[1:-1]):
                raise InvalidEndpointError(f"invalid IPv6 host: {host!r}")
        elif any(c.isspace() or c in "/?#@[]" for c in host):
            raise InvalidEndpointError(f"invalid host: {host!r}")
        elif ":" in host:
            # Bare IPv6 literals must be bracketed inside a URL.
            if not _is_ipv6(host):
                raise InvalidEndpointError(f"invalid host: {host!r}")
            host = f"[{host}]"

        if not port.isdigit():
            raise InvalidEndpointError(f"invalid port: {port!r}")

        url = f"http://{host}:{port}{path}"
        try:
            parts = urlsplit(url)
            parsed_port = parts.port
        except ValueError as e:
            raise InvalidEndpointError(f"invalid server address {url!r}: {e}") from e

        if not parts.hostname or parsed_port is None or not (1 <= parsed_port <= 65535):
            raise InvalidEndpointError(f"invalid server address {url!r}")

        return Endpoint(url=url)


class FailureKind(str, Enum):
    CONFIG = "config"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    APPLICATION = "application"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    code: str


@dataclass(frozen=True)
class Success:
    code: str
    article_name: str


@dataclass(frozen=True)
class Failure:
    code: str
    message: str
    kind: FailureKind


ScanOutcome = Union[Idle, Loading, Success, Failure]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HistoryEntry:
    code: str
    message: str
    succeeded: bool
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=_utc_now)


def _is_ipv6(value: str) -> bool:
    try:
        return ipaddress.ip_address(value).version == 6
    except ValueError:
        return False

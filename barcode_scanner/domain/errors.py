from __future__ import annotations


class ScannerError(Exception):
    """Base class for every error raised while submitting a scanned code."""


class ConfigError(ScannerError):
    """Server address cannot be turned into an endpoint. Raised before any request."""


class MissingHostError(ConfigError):
    pass


class InvalidEndpointError(ConfigError):
    pass


class TransportError(ScannerError):
    """The request could not be sent or no response was received."""


class ProtocolError(ScannerError):
    """The server answered with a payload we cannot interpret."""


class ApplicationError(ScannerError):
    """The server explicitly reported that the article does not exist."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

from __future__ import annotations

from enum import Enum


class Authorization(str, Enum):
    NOT_DETERMINED = "not_determined"
    AUTHORIZED = "authorized"
    DENIED = "denied"
    RESTRICTED = "restricted"


class AccessStatus(str, Enum):
    UNKNOWN = "unknown"
    UNAVAILABLE = "unavailable"  # no camera on this device
    DENIED = "denied"
    UNSUPPORTED = "unsupported"  # camera present, scanning not supported
    AVAILABLE = "available"


STATUS_MESSAGES = {
    AccessStatus.UNKNOWN: "Requesting camera access",
    AccessStatus.UNAVAILABLE: "Your device doesn't have a camera",
    AccessStatus.DENIED: "Please provide access to the camera in settings",
    AccessStatus.UNSUPPORTED: "Your device doesn't have support for scanning barcode with this app",
    AccessStatus.AVAILABLE: "Camera ready",
}


def resolve_access_status(
        camera_present: bool,
        authorization: Authorization,
        scanner_supported: bool,
) -> AccessStatus:
    if not camera_present:
        return AccessStatus.UNAVAILABLE
    if authorization in (Authorization.DENIED, Authorization.RESTRICTED):
        return AccessStatus.DENIED
    if authorization == Authorization.NOT_DETERMINED:
        return AccessStatus.UNKNOWN
    return AccessStatus.AVAILABLE if scanner_supported else AccessStatus.UNSUPPORTED

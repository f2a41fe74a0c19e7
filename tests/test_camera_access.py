import unittest

from barcode_scanner.adapters.null_camera import NullCameraAccessProvider
from barcode_scanner.app.camera_access import CameraAccessNegotiator
from barcode_scanner.domain.camera_access import (
    STATUS_MESSAGES,
    AccessStatus,
    Authorization,
    resolve_access_status,
)


class TestResolveAccessStatus(unittest.TestCase):
    def test_no_camera(self):
        for auth in Authorization:
            with self.subTest(auth=auth):
                self.assertEqual(resolve_access_status(False, auth, True), AccessStatus.UNAVAILABLE)

    def test_denied_and_restricted(self):
        self.assertEqual(resolve_access_status(True, Authorization.DENIED, True), AccessStatus.DENIED)
        self.assertEqual(resolve_access_status(True, Authorization.RESTRICTED, True), AccessStatus.DENIED)

    def test_not_determined(self):
        self.assertEqual(resolve_access_status(True, Authorization.NOT_DETERMINED, True), AccessStatus.UNKNOWN)

    def test_authorized(self):
        self.assertEqual(resolve_access_status(True, Authorization.AUTHORIZED, True), AccessStatus.AVAILABLE)
        self.assertEqual(resolve_access_status(True, Authorization.AUTHORIZED, False), AccessStatus.UNSUPPORTED)

    def test_every_status_has_a_message(self):
        self.assertEqual(set(STATUS_MESSAGES), set(AccessStatus))


class CountingProvider(NullCameraAccessProvider):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.requests = 0
        self.pending = None

    def request_access(self, on_result):
        self.requests += 1
        self.pending = on_result


class TestCameraAccessNegotiator(unittest.TestCase):
    def test_initial_status_is_unknown(self):
        negotiator = CameraAccessNegotiator(NullCameraAccessProvider(present=True))
        self.assertEqual(negotiator.status, AccessStatus.UNKNOWN)

    def test_start_resolves_once(self):
        negotiator = CameraAccessNegotiator(NullCameraAccessProvider(present=True))
        self.assertEqual(negotiator.start(), AccessStatus.AVAILABLE)
        self.assertEqual(negotiator.message, "Camera ready")

    def test_no_camera(self):
        negotiator = CameraAccessNegotiator(NullCameraAccessProvider(present=False))
        self.assertEqual(negotiator.start(), AccessStatus.UNAVAILABLE)

    def test_undetermined_requests_access_and_applies_answer(self):
        provider = CountingProvider(present=True, authorization=Authorization.NOT_DETERMINED)
        negotiator = CameraAccessNegotiator(provider)
        seen = []
        negotiator.subscribe(seen.append)

        self.assertEqual(negotiator.start(), AccessStatus.UNKNOWN)
        self.assertEqual(provider.requests, 1)

        # A refresh while the OS prompt is open does not ask again.
        negotiator.refresh()
        self.assertEqual(provider.requests, 1)

        provider.pending(False)
        self.assertEqual(negotiator.status, AccessStatus.DENIED)
        self.assertEqual(seen, [AccessStatus.DENIED])

    def test_granted_synchronously(self):
        provider = NullCameraAccessProvider(present=True, authorization=Authorization.NOT_DETERMINED, grant=True)
        negotiator = CameraAccessNegotiator(provider)
        self.assertEqual(negotiator.start(), AccessStatus.AVAILABLE)

    def test_refresh_picks_up_changed_os_state(self):
        provider = NullCameraAccessProvider(present=True, authorization=Authorization.DENIED)
        negotiator = CameraAccessNegotiator(provider)
        self.assertEqual(negotiator.start(), AccessStatus.DENIED)

        provider._authorization = Authorization.AUTHORIZED
        self.assertEqual(negotiator.refresh(), AccessStatus.AVAILABLE)

    def test_listeners_only_fire_on_change(self):
        negotiator = CameraAccessNegotiator(NullCameraAccessProvider(present=True))
        seen = []
        negotiator.subscribe(seen.append)
        negotiator.start()
        negotiator.refresh()
        self.assertEqual(seen, [AccessStatus.AVAILABLE])


if __name__ == "__main__":
    unittest.main()

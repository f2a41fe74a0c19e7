import unittest

from barcode_scanner.app.session import SessionStore
from barcode_scanner.domain.models import (
    Failure,
    FailureKind,
    HistoryEntry,
    Idle,
    Loading,
    Success,
)


class TestSessionStore(unittest.TestCase):
    def setUp(self):
        self.store = SessionStore()
        self.seen = []
        self.store.subscribe(self.seen.append)

    def test_initially_idle_and_empty(self):
        snap = self.store.snapshot()
        self.assertEqual(snap.outcome, Idle())
        self.assertEqual(snap.history, ())

    def test_publish_notifies_without_history(self):
        self.store.publish(Loading("A"))
        self.assertEqual(len(self.seen), 1)
        self.assertEqual(self.seen[0].outcome, Loading("A"))
        self.assertEqual(self.seen[0].history, ())

    def test_complete_applies_outcome_and_entry_in_one_notification(self):
        self.store.publish(Loading("A"))
        entry = HistoryEntry(code="A", message="Milk", succeeded=True)
        self.store.complete(Success("A", "Milk"), entry)

        self.assertEqual(len(self.seen), 2)
        last = self.seen[-1]
        self.assertEqual(last.outcome, Success("A", "Milk"))
        self.assertEqual(last.history, (entry,))

    def test_listener_sees_consistent_state_when_reading_store(self):
        observed = []
        self.store.subscribe(lambda snap: observed.append((self.store.outcome, len(self.store.history))))
        self.store.complete(
            Failure("A", "invalid response", FailureKind.PROTOCOL),
            HistoryEntry(code="A", message="invalid response", succeeded=False),
        )
        self.assertEqual(observed, [(Failure("A", "invalid response", FailureKind.PROTOCOL), 1)])

    def test_unsubscribe(self):
        other = []
        unsubscribe = self.store.subscribe(other.append)
        unsubscribe()
        unsubscribe()
        self.store.publish(Loading("A"))
        self.assertEqual(other, [])
        self.assertEqual(len(self.seen), 1)


if __name__ == "__main__":
    unittest.main()

import threading
import unittest

from barcode_scanner.domain.history import HistoryStore
from barcode_scanner.domain.models import HistoryEntry


class TestHistoryStore(unittest.TestCase):
    def test_starts_empty(self):
        self.assertEqual(HistoryStore().all(), ())

    def test_newest_first(self):
        store = HistoryStore()
        entries = [HistoryEntry(code=str(i), message="m", succeeded=True) for i in range(1, 6)]
        for e in entries:
            store.append(e)

        self.assertEqual([e.code for e in store.all()], ["5", "4", "3", "2", "1"])
        self.assertEqual(len(store), 5)

    def test_no_dedup(self):
        store = HistoryStore()
        store.append(HistoryEntry(code="A", message="x", succeeded=False))
        store.append(HistoryEntry(code="A", message="x", succeeded=False))
        self.assertEqual(len(store), 2)

    def test_read_is_idempotent(self):
        store = HistoryStore()
        store.append(HistoryEntry(code="A", message="x", succeeded=True))
        self.assertEqual(store.all(), store.all())

    def test_snapshot_is_not_affected_by_later_appends(self):
        store = HistoryStore()
        store.append(HistoryEntry(code="A", message="x", succeeded=True))
        snap = store.all()
        store.append(HistoryEntry(code="B", message="y", succeeded=True))
        self.assertEqual(len(snap), 1)
        self.assertEqual([e.code for e in store], ["B", "A"])

    def test_entries_have_unique_ids_and_aware_timestamps(self):
        a = HistoryEntry(code="A", message="x", succeeded=True)
        b = HistoryEntry(code="A", message="x", succeeded=True)
        self.assertNotEqual(a.id, b.id)
        self.assertIsNotNone(a.timestamp.tzinfo)

    def test_concurrent_appends_are_all_kept(self):
        store = HistoryStore()

        def worker(n):
            for i in range(200):
                store.append(HistoryEntry(code=f"{n}-{i}", message="", succeeded=True))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(store), 800)


if __name__ == "__main__":
    unittest.main()

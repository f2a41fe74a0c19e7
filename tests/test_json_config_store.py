import json
import tempfile
import unittest
from pathlib import Path

from barcode_scanner.adapters.json_config_store import JsonServerConfigStore
from barcode_scanner.adapters.memory_config_store import InMemoryServerConfigStore
from barcode_scanner.domain.models import ServerConfig


class TestJsonServerConfigStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "nested" / "server.json"
        self.store = JsonServerConfigStore(self.path)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file_is_unconfigured_with_default_port(self):
        self.assertEqual(self.store.load(), ServerConfig(host="", port="3000"))

    def test_save_then_load(self):
        self.store.save(ServerConfig(host="192.168.1.5", port="8080"))
        self.assertTrue(self.path.exists())
        self.assertEqual(self.store.load(), ServerConfig(host="192.168.1.5", port="8080"))
        self.assertEqual(json.loads(self.path.read_text(encoding="utf-8")), {"host": "192.168.1.5", "port": "8080"})

    def test_missing_port_uses_default(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text('{"host": "10.0.0.2"}', encoding="utf-8")
        self.assertEqual(self.store.load(), ServerConfig(host="10.0.0.2", port="3000"))

    def test_numeric_port_is_read_as_string(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text('{"host": "10.0.0.2", "port": 5000}', encoding="utf-8")
        self.assertEqual(self.store.load().port, "5000")

    def test_corrupt_file_is_ignored(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertLogs("barcode_scanner.adapters.json_config_store", level="WARNING"):
            self.assertEqual(self.store.load(), ServerConfig(host="", port="3000"))

    def test_non_object_file_is_ignored(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text('["10.0.0.2"]', encoding="utf-8")
        with self.assertLogs("barcode_scanner.adapters.json_config_store", level="WARNING"):
            self.assertEqual(self.store.load().host, "")


class TestInMemoryServerConfigStore(unittest.TestCase):
    def test_returns_copies(self):
        store = InMemoryServerConfigStore(host="h")
        config = store.load()
        config.host = "changed"
        self.assertEqual(store.load().host, "h")

    def test_save(self):
        store = InMemoryServerConfigStore()
        store.save(ServerConfig(host="h", port="1"))
        self.assertEqual(store.load(), ServerConfig(host="h", port="1"))


if __name__ == "__main__":
    unittest.main()

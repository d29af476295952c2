import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from globaltags.cache import TagCache  # noqa: E402
from globaltags.resources.base import Resource  # noqa: E402
from globaltags.settings import Settings  # noqa: E402


class DummyClient:
    def __init__(self) -> None:
        self._logger = logging.getLogger("globaltags.tests")
        self.settings = Settings()
        self.cache = TagCache()
        self.validation = "warn"
        self.calls: list[tuple[str, str, object, object, dict]] = []

    def request(self, method, path, json=None, timeout=None, **kwargs):
        self.calls.append((method, path, json, timeout, kwargs))
        return {"ok": True}


class BaseResourceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = DummyClient()
        self.resource = Resource(self.client)  # type: ignore[arg-type]

    def test_shared_properties(self):
        self.assertIs(self.resource._logger, self.client._logger)
        self.assertIs(self.resource._settings, self.client.settings)
        self.assertIs(self.resource._cache, self.client.cache)

    def test_validation_default_and_override(self):
        self.assertEqual(self.resource._validation(None), "warn")
        self.assertEqual(self.resource._validation("strict"), "strict")

    def test_request_passthrough(self):
        result = self.resource._request("GET", "/x", json={"b": 2}, timeout=5)
        self.assertEqual(result, {"ok": True})
        self.assertEqual(self.client.calls[-1], ("GET", "/x", {"b": 2}, 5, {}))

    def test_get(self):
        self.resource._get("/g", timeout=2)
        self.assertEqual(self.client.calls[-1], ("GET", "/g", None, 2, {}))

    def test_post(self):
        self.resource._post("/p", json={"x": 1}, timeout=3, check_status=False)
        self.assertEqual(self.client.calls[-1], ("POST", "/p", {"x": 1}, 3, {"check_status": False}))

    def test_delete(self):
        self.resource._delete("/d", json={"z": 3}, timeout=6)
        self.assertEqual(self.client.calls[-1], ("DELETE", "/d", {"z": 3}, 6, {}))

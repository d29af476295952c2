import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from globaltags.resources._common_types import _normalize_tag_name, _tag_path  # noqa: E402
from globaltags.resources.tags_types import is_tag  # noqa: E402


class CommonTypesTests(unittest.TestCase):
    def test_normalize_tag_name_valid(self):
        self.assertEqual(_normalize_tag_name("Hello"), "Hello")
        self.assertEqual(_normalize_tag_name(" spaced "), " spaced ")

    def test_normalize_tag_name_invalid(self):
        self.assertIsNone(_normalize_tag_name(""))
        self.assertIsNone(_normalize_tag_name("   "))
        self.assertIsNone(_normalize_tag_name(None))
        self.assertIsNone(_normalize_tag_name(5))

    def test_tag_path(self):
        self.assertEqual(_tag_path("plain"), "/tags/plain")
        self.assertEqual(_tag_path("with/slash"), "/tags/with%2Fslash")

    def test_is_tag(self):
        self.assertTrue(is_tag({"name": "a", "message": "b", "owner_id": "1"}))
        self.assertTrue(is_tag({"owner_id": "1"}))
        self.assertFalse(is_tag({"name": "a", "message": "b"}))
        self.assertFalse(is_tag(None))
        self.assertFalse(is_tag(["owner_id"]))


if __name__ == "__main__":
    unittest.main()

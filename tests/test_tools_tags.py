import logging
import sys
import types
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from globaltags.tools.tags import choose_tag, format_tag_list  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


def _install_fake_inquirer(selections):
    module = types.ModuleType("InquirerPy")
    resolver = types.ModuleType("InquirerPy.resolver")
    calls = {"index": 0, "questions": []}

    def prompt(questions):
        calls["questions"].append(questions)
        value = selections[calls["index"]]
        calls["index"] += 1
        return value

    resolver.prompt = prompt
    module.resolver = resolver
    sys.modules["InquirerPy"] = module
    sys.modules["InquirerPy.resolver"] = resolver
    return calls


class ToolsTagsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tags = [
            {"name": "hello", "message": "Hello there", "owner_id": "1"},
            {"name": "long", "message": "x" * 80 + "\nsecond line", "owner_id": "1"},
        ]

    def tearDown(self) -> None:
        sys.modules.pop("InquirerPy", None)
        sys.modules.pop("InquirerPy.resolver", None)

    def test_format_tag_list(self):
        self.assertEqual(format_tag_list(self.tags), "hello\nlong\n")

    def test_format_tag_list_empty(self):
        self.assertEqual(format_tag_list([]), "")

    def test_choose_tag_empty(self):
        calls = _install_fake_inquirer([])
        self.assertIsNone(choose_tag([]))
        self.assertEqual(calls["index"], 0)

    def test_choose_tag_selects(self):
        _install_fake_inquirer([{"selection": ("tag", self.tags[1])}])
        self.assertEqual(choose_tag(self.tags), self.tags[1])

    def test_choose_tag_cancel(self):
        _install_fake_inquirer([{"selection": ("cancel", None)}])
        self.assertIsNone(choose_tag(self.tags))

    def test_choose_tag_invalid_selection(self):
        _install_fake_inquirer([{"selection": None}])
        self.assertIsNone(choose_tag(self.tags))

    def test_choose_tag_non_dict_result(self):
        _install_fake_inquirer(["cancel"])
        self.assertIsNone(choose_tag(self.tags))

    def test_choose_tag_previews_are_truncated(self):
        calls = _install_fake_inquirer([{"selection": ("cancel", None)}])
        choose_tag(self.tags)
        names = [choice["name"] for choice in calls["questions"][0][0]["choices"]]
        self.assertEqual(names[1], "hello  Hello there")
        self.assertTrue(names[2].endswith("..."))
        self.assertNotIn("second line", names[2])


if __name__ == "__main__":
    unittest.main()

import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
TESTS_DIR = Path(__file__).resolve().parent
for path in (SRC_DIR, TESTS_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from globaltags import GlobalTags, GlobalTagsExtension, Settings  # noqa: E402
from fakes import SERVER_KEY, SERVER_URL, FakeHost, FakeTagServer  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)

CHANNEL = "chan-1"
HELLO = {"name": "hello", "message": "Hello there", "owner_id": "100"}


class ExtensionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.server = FakeTagServer([HELLO])
        self.host = FakeHost()

    def make(self, **settings):
        values = {"server_url": SERVER_URL, "server_key": SERVER_KEY}
        values.update(settings)
        client = GlobalTags(settings=Settings(**values), session=self.server)  # type: ignore[arg-type]
        extension = GlobalTagsExtension(self.host, client=client)
        self.addCleanup(extension.stop)
        return extension

    def test_start_warms_cache(self):
        extension = self.make()
        self.assertTrue(extension.start())
        self.assertIn("hello", extension.client.cache)
        self.assertEqual(self.host.notices, [])

    def test_start_cached_tag_needs_no_request(self):
        extension = self.make()
        extension.start()
        calls = len(self.server.calls)
        self.assertEqual(extension.execute("gt", [{"name": "tag_name", "value": "hello"}], CHANNEL), {"content": "Hello there"})
        self.assertEqual(len(self.server.calls), calls)

    def test_start_missing_settings_shows_notices(self):
        extension = self.make(server_url="", server_key="")
        self.assertFalse(extension.start())
        self.assertEqual(len(self.host.notices), 2)
        self.assertEqual(self.server.calls, [])

    def test_start_missing_key_only(self):
        extension = self.make(server_key="")
        self.assertFalse(extension.start())
        self.assertEqual(self.host.notices, ["GlobalTags requires a server key to be configured in settings."])

    def test_execute_routes_main_command(self):
        extension = self.make()
        args = [{"name": "who", "options": [{"name": "tag_name", "value": "hello"}]}]
        extension.execute("globaltags", args, CHANNEL)
        self.assertEqual(self.host.last_bot_message, (CHANNEL, "hello is owned by <@100>", True))

    def test_execute_unknown_command(self):
        extension = self.make()
        with self.assertRaises(KeyError):
            extension.execute("tags", [], CHANNEL)

    def test_on_before_send(self):
        extension = self.make()
        extension.on_before_send(CHANNEL, "gt!hello").result(timeout=5)
        self.assertEqual(self.host.messages, [(CHANNEL, "Hello there")])
        self.assertIsNone(extension.on_before_send(CHANNEL, "plain"))

    def test_inline_lookup_after_restart(self):
        extension = self.make()
        extension.start()
        extension.stop()
        extension.start()
        future = extension.on_before_send(CHANNEL, "gt!hello")
        self.assertTrue(future)
        future.result(timeout=5)
        self.assertEqual(self.host.messages, [(CHANNEL, "Hello there")])

    def test_commands(self):
        extension = self.make(generation_enabled=False)
        self.assertEqual([command["name"] for command in extension.commands], ["globaltags", "gt"])

    def test_builds_own_client_from_settings(self):
        extension = GlobalTagsExtension(self.host, settings=Settings(server_url="http://x.test"))
        self.addCleanup(extension.stop)
        self.assertEqual(extension.client.settings.server_url, "http://x.test")
        self.assertIs(extension.settings, extension.client.settings)


if __name__ == "__main__":
    unittest.main()

"""Terminal demo that plays the chat host for :class:`globaltags.GlobalTagsExtension`.

Run with the virtual environment activated::

    python examples/demo_globaltags.py

Set ``GLOBALTAGS_SERVER_URL`` / ``GLOBALTAGS_SERVER_KEY`` (and optionally the
``GLOBALTAGS_GENERATION_*`` variables) if your servers are not at the
defaults. Lines starting with ``/`` run commands, for example::

    /globaltags create hello Hello there
    /globaltags list 1
    /gt hello
    /pick 1

anything else is "sent" and goes through the inline ``gt!`` interceptor.
"""

import logging
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from globaltags import GlobalTagsExtension
from globaltags.tools.tags import choose_tag

logging.basicConfig(level=logging.INFO)

CHANNEL = "terminal"

# Positional argument names per sub-command; the last one swallows the rest of the line.
ARGUMENTS = {
    "create": ["tag_name", "tag_message"],
    "delete": ["tag_name"],
    "show": ["tag_name"],
    "who": ["tag_name"],
    "list": ["user"],
    "prompt": ["prompt"],
}


class TerminalHost:
    def __init__(self, user_id: str, username: str) -> None:
        self.user = {"id": user_id, "username": username}

    def current_user(self):
        return self.user

    def send_message(self, channel_id, content):
        print(f"[{channel_id}] {self.user['username']}: {content}")

    def send_bot_message(self, channel_id, content, *, ephemeral=False):
        visibility = " (only you)" if ephemeral else ""
        print(f"[{channel_id}] bot{visibility}: {content}")

    def show_notice(self, message):
        print(f"NOTICE: {message}")


def parse_options(names, text):
    values = text.split(maxsplit=len(names) - 1) if text else []
    return [{"name": name, "value": value} for name, value in zip(names, values)]


def main() -> None:
    host = TerminalHost(os.environ.get("DEMO_USER_ID", "1"), os.environ.get("DEMO_USERNAME", "demo"))
    extension = GlobalTagsExtension(host)
    extension.start()

    try:
        for line in sys.stdin:
            line = line.rstrip("\n")
            if not line:
                continue
            if not line.startswith("/"):
                pending = extension.on_before_send(CHANNEL, line)
                if pending is None:
                    host.send_message(CHANNEL, line)
                else:
                    pending.result()
                continue

            command, _, rest = line[1:].partition(" ")
            if command == "pick":
                tag = choose_tag(extension.client.tags.list(rest.strip() or None))
                if tag is not None:
                    host.send_message(CHANNEL, tag["message"])
                continue
            if command == "gt":
                payload = extension.execute("gt", parse_options(["tag_name"], rest), CHANNEL)
            else:
                sub_command, _, sub_rest = rest.partition(" ")
                options = parse_options(ARGUMENTS.get(sub_command, []), sub_rest)
                payload = extension.execute(command, [{"name": sub_command, "options": options}], CHANNEL)
            if payload:
                host.send_message(CHANNEL, payload["content"])
    finally:
        extension.stop()


if __name__ == "__main__":
    main()

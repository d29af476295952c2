"""The extension object a chat host loads."""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Any, Optional, Sequence

from .client import GlobalTags
from .commands import MAIN_COMMAND, SHORT_COMMAND, CommandDispatcher
from .host import ChatHost, CommandOption, MessagePayload
from .interceptor import InlineInterceptor
from .settings import Settings

NAME = "GlobalTags"
DESCRIPTION = "A tag system for storing and retrieving text snippets from a configured server"

_NOTICES = {
    "server_url": "GlobalTags requires a server URL to be configured in settings.",
    "server_key": "GlobalTags requires a server key to be configured in settings.",
}


class GlobalTagsExtension:
    """Composes the client, command dispatcher and inline interceptor."""

    name = NAME
    description = DESCRIPTION

    def __init__(
        self,
        host: ChatHost,
        *,
        settings: Optional[Settings] = None,
        client: Optional[GlobalTags] = None,
    ) -> None:
        self.host = host
        self.client = client or GlobalTags(settings=settings)
        self.settings = self.client.settings
        self.dispatcher = CommandDispatcher(self.client, host)
        self.interceptor = InlineInterceptor(self.client, host)
        self._logger = logging.getLogger(__name__)

    @property
    def commands(self) -> list[dict[str, Any]]:
        return self.dispatcher.definitions()

    def start(self) -> bool:
        """Check required settings and warm the tag cache.

        Returns ``True`` when the cache was warmed.
        """
        missing = self.settings.missing()
        for field in missing:
            self.host.show_notice(_NOTICES[field])
        if missing:
            self._logger.warning("Not fetching tags; missing settings: %s", ", ".join(missing))
            return False

        count = self.client.tags.warm()
        self._logger.info("Cached %d tags on start", count)
        return True

    def stop(self) -> None:
        self.interceptor.shutdown(wait=False)

    def execute(
        self,
        command: str,
        args: Sequence[CommandOption],
        channel_id: str,
    ) -> Optional[MessagePayload]:
        """Run a registered command by name."""
        if command == MAIN_COMMAND:
            return self.dispatcher.execute(args, channel_id)
        if command == SHORT_COMMAND:
            return self.dispatcher.execute_short(args, channel_id)
        raise KeyError(f"Unknown command: {command}")

    def on_before_send(self, channel_id: str, content: str) -> Optional[Future]:
        return self.interceptor.on_before_send(channel_id, content)


__all__ = ["GlobalTagsExtension"]

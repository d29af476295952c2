"""Inline ``gt!<name>`` lookups on outgoing messages."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, TYPE_CHECKING

from .commands import not_found
from .host import ChatHost

if TYPE_CHECKING:  # pragma: no cover
    from .client import GlobalTags


class InlineInterceptor:
    """Cancels prefixed outgoing messages and posts the tag they name instead."""

    def __init__(self, client: "GlobalTags", host: ChatHost, *, max_workers: int = 1) -> None:
        self.client = client
        self.host = host
        self._logger = logging.getLogger(__name__)
        self._max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    def on_before_send(self, channel_id: str, content: str) -> Optional[Future]:
        """Inspect an outgoing message.

        Returns a truthy future when the send must be cancelled, ``None`` to let
        the message through. A prefix with nothing after it still cancels the
        send and posts nothing.
        """
        settings = self.client.settings
        prefix = settings.inline_prefix
        if not settings.inline_enabled or not prefix or not content.startswith(prefix):
            return None

        name = content[len(prefix):].strip()
        if not name:
            self._logger.info("Dropped inline lookup with an empty tag name")
            done: Future = Future()
            done.set_result(None)
            return done

        return self._pool().submit(self._lookup, channel_id, name)

    def _pool(self) -> ThreadPoolExecutor:
        # Recreated on first use after shutdown().
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers, thread_name_prefix="globaltags-inline"
                )
            return self._executor

    def _lookup(self, channel_id: str, name: str) -> None:
        try:
            tag = self.client.tags.fetch(name)
            if tag is None:
                self.host.send_bot_message(channel_id, not_found(name), ephemeral=True)
            else:
                self.host.send_message(channel_id, tag["message"])
        except Exception:
            self._logger.exception("Inline lookup for %r failed", name)
            raise

    def shutdown(self, wait: bool = True) -> None:
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)


__all__ = ["InlineInterceptor"]

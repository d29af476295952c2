"""In-memory tag cache."""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from .resources.tags_types import TagResponse, is_tag


class TagCache:
    """Unbounded ``name -> tag`` map with manual invalidation.

    Entries never expire; a name is dropped only through :meth:`invalidate`
    or :meth:`clear`. Values that are not tags are never stored.

    Every invalidation bumps a per-name version. A reader that passes the
    :meth:`version` it saw before going to the network to :meth:`store` has
    its write dropped if the name was invalidated in the meantime.
    """

    def __init__(self) -> None:
        self._entries: dict[str, TagResponse] = {}
        self._versions: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Optional[TagResponse]:
        with self._lock:
            return self._entries.get(name)

    def version(self, name: str) -> int:
        with self._lock:
            return self._versions.get(name, 0)

    def store(self, name: str, tag: object, *, if_version: Optional[int] = None) -> bool:
        """Cache ``tag`` under ``name``.

        Returns ``False`` without storing if ``tag`` is not a tag, or if
        ``if_version`` is given and ``name`` has been invalidated since.
        """
        if not is_tag(tag):
            return False
        with self._lock:
            if if_version is not None and self._versions.get(name, 0) != if_version:
                return False
            self._entries[name] = tag
        return True

    def invalidate(self, name: str) -> None:
        with self._lock:
            self._entries.pop(name, None)
            self._versions[name] = self._versions.get(name, 0) + 1

    def warm(self, tags: Iterable[TagResponse]) -> int:
        """Store every named tag from ``tags``; returns how many were cached."""
        count = 0
        for tag in tags:
            name = tag.get("name") if isinstance(tag, dict) else None
            if isinstance(name, str) and self.store(name, tag):
                count += 1
        return count

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def names(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["TagCache"]

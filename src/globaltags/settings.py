"""Extension settings and their environment defaults."""

from __future__ import annotations

import os
from typing import Any, Mapping

DEFAULT_SERVER_URL = os.environ.get("GLOBALTAGS_SERVER_URL", "http://127.0.0.1:8000")
DEFAULT_SERVER_KEY = os.environ.get("GLOBALTAGS_SERVER_KEY", "")
DEFAULT_GENERATION_URL = os.environ.get("GLOBALTAGS_GENERATION_URL", "http://127.0.0.1:11434")
DEFAULT_GENERATION_KEY = os.environ.get("GLOBALTAGS_GENERATION_KEY", "")
DEFAULT_GENERATION_MODEL = os.environ.get("GLOBALTAGS_GENERATION_MODEL", "deepseek-r1:7b")
DEFAULT_INLINE_PREFIX = "gt!"

REQUIRED_SETTINGS = ("server_url", "server_key")


class Settings:
    """User-editable configuration for the tag and generation clients.

    The host application owns persistence; :meth:`as_dict` and
    :meth:`from_dict` are the round trip it should use.
    """

    _FIELDS = (
        "server_url",
        "server_key",
        "generation_url",
        "generation_key",
        "generation_model",
        "generation_enabled",
        "inline_enabled",
        "inline_prefix",
    )

    def __init__(
        self,
        *,
        server_url: str = DEFAULT_SERVER_URL,
        server_key: str = DEFAULT_SERVER_KEY,
        generation_url: str = DEFAULT_GENERATION_URL,
        generation_key: str = DEFAULT_GENERATION_KEY,
        generation_model: str = DEFAULT_GENERATION_MODEL,
        generation_enabled: bool = True,
        inline_enabled: bool = True,
        inline_prefix: str = DEFAULT_INLINE_PREFIX,
    ) -> None:
        """Create a settings object.

        Parameters
        ----------
        server_url
            Base URL of the tags server.
        server_key
            Authentication key sent with create and delete requests.
        generation_url
            Base URL of the text-generation server.
        generation_key
            Optional bearer token for the generation server.
        generation_model
            Model name sent with generation requests.
        generation_enabled
            Whether the ``prompt`` sub-command is available at all.
        inline_enabled
            Whether messages starting with ``inline_prefix`` are turned into
            tag lookups.
        inline_prefix
            Reserved leading token for inline lookups.
        """
        self.server_url = server_url
        self.server_key = server_key
        self.generation_url = generation_url
        self.generation_key = generation_key
        self.generation_model = generation_model
        self.generation_enabled = generation_enabled
        self.inline_enabled = inline_enabled
        self.inline_prefix = inline_prefix

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "Settings":
        """Build settings from a persisted mapping, ignoring unknown keys."""
        return cls(**{key: value for key, value in values.items() if key in cls._FIELDS})

    def as_dict(self) -> dict[str, Any]:
        return {field: getattr(self, field) for field in self._FIELDS}

    def update(self, **changes: Any) -> None:
        """Apply user edits. Unknown setting names raise ``AttributeError``."""
        unknown = [key for key in changes if key not in self._FIELDS]
        if unknown:
            raise AttributeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        for key, value in changes.items():
            setattr(self, key, value)

    def missing(self) -> list[str]:
        """Return the required settings that are currently empty."""
        return [field for field in REQUIRED_SETTINGS if not getattr(self, field)]

    def __repr__(self) -> str:
        # Keys stay out of reprs and logs.
        return (
            f"Settings(server_url={self.server_url!r}, generation_url={self.generation_url!r}, "
            f"generation_model={self.generation_model!r}, generation_enabled={self.generation_enabled!r}, "
            f"inline_enabled={self.inline_enabled!r})"
        )


__all__ = [
    "DEFAULT_GENERATION_MODEL",
    "DEFAULT_GENERATION_URL",
    "DEFAULT_INLINE_PREFIX",
    "DEFAULT_SERVER_URL",
    "Settings",
]

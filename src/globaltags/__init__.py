"""Public package surface for the globaltags client."""

from .cache import TagCache
from .client import GlobalTags
from .extension import GlobalTagsExtension
from .settings import DEFAULT_SERVER_URL, Settings
from .utils import trim_span

__all__ = [
    "DEFAULT_SERVER_URL",
    "GlobalTags",
    "GlobalTagsExtension",
    "Settings",
    "TagCache",
    "trim_span",
]

"""Resource module exports."""

from .generation import Generation
from .tags import Tags

__all__ = [
    "Generation",
    "Tags",
]

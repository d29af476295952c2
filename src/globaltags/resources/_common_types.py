"""Shared types and validation helpers for resources.

This module contains:
- Validation mode type (shared across all resources)
- Tag name normalization
"""

from __future__ import annotations

from typing import Literal
from urllib.parse import quote

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]


# --- Tag Names --- #
def _normalize_tag_name(name: object) -> str | None:
    """Validate a tag name.

    Parameters
    ----------
    name
        Candidate tag name. Names are case-sensitive and kept verbatim.

    Returns
    -------
    str | None
        The name unchanged, or None if it is not a string or is blank.
    """
    if not isinstance(name, str) or not name.strip():
        return None
    return name


def _tag_path(name: object) -> str:
    """Return the ``/tags/{name}`` path with the name quoted as one segment."""
    return "/tags/" + quote(str(name), safe="")

"""Types for the tags resource.

A tag is only considered present when its payload carries ``owner_id``;
every read path goes through :func:`is_tag` so partial or malformed values
are treated the same as a miss.
"""

from __future__ import annotations

from typing_extensions import NotRequired, ReadOnly, TypedDict, TypeGuard


class TagResponse(TypedDict):
    """Readonly tag dict returned by tag endpoints."""
    name: ReadOnly[str]
    message: ReadOnly[str]
    owner_id: ReadOnly[str]
    owner: NotRequired[ReadOnly[str]]


class TagCreate(TypedDict):
    """Tag fields supplied by the caller of ``Tags.create``."""
    name: str
    message: str
    owner: str
    owner_id: str


class ApiResponse(TypedDict, total=False):
    """Result of a create or delete request."""
    success: bool
    data: TagResponse
    error: str


def is_tag(value: object) -> TypeGuard[TagResponse]:
    """Return ``True`` when ``value`` looks like a stored tag."""
    return isinstance(value, dict) and "owner_id" in value


__all__ = ["ApiResponse", "TagCreate", "TagResponse", "is_tag"]

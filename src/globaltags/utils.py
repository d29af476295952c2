"""Shared helpers for the GlobalTags client."""

from __future__ import annotations


def trim_span(start: str, end: str, text: str) -> str:
    """Remove the first ``start``...``end`` span from ``text``, markers included.

    Returns ``text`` unchanged when ``start`` is missing or has no ``end``
    after it.
    """
    start_idx = text.find(start)
    if start_idx == -1:
        return text
    end_idx = text.find(end, start_idx + len(start))
    if end_idx == -1:
        return text
    return text[:start_idx] + text[end_idx + len(end):]

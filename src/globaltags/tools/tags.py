"""Tag helper tools."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from globaltags.resources.tags_types import TagResponse


def format_tag_list(tags: Iterable[TagResponse]) -> str:
    """Return one tag name per line."""
    return "".join(f"{tag['name']}\n" for tag in tags)


def choose_tag(tags: Sequence[TagResponse]) -> TagResponse | None:
    """Interactively choose a tag using InquirerPy.

    Parameters
    ----------
    tags
        Tags to choose from, typically the result of ``Tags.list``.

    Returns
    -------
    TagResponse | None
        Selected tag, or None if the user cancels or there is nothing to pick.
    """
    if not tags:
        return None

    try:
        from InquirerPy.resolver import prompt
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError("InquirerPy is required for choose_tag.") from exc

    choices: list[dict[str, Any]] = [{"name": " X Cancel", "value": ("cancel", None)}]
    for tag in tags:
        preview = tag["message"].splitlines()[0] if tag["message"] else ""
        if len(preview) > 40:
            preview = preview[:37] + "..."
        choices.append({"name": f"{tag['name']}  {preview}", "value": ("tag", tag)})

    result = prompt(
        [
            {
                "type": "fuzzy",
                "name": "selection",
                "message": "Select a tag",
                "choices": choices,
            }
        ],
    )
    selection = result.get("selection") if isinstance(result, dict) else None
    if not isinstance(selection, tuple) or len(selection) != 2:
        return None

    action, payload = selection
    if action != "tag" or not isinstance(payload, dict):
        return None
    return payload

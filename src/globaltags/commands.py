"""Slash-command handling for ``/globaltags`` and ``/gt``."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, TYPE_CHECKING

from .host import ChatHost, CommandOption, MessagePayload, find_option
from .resources.tags_types import TagResponse
from .tools.tags import format_tag_list

if TYPE_CHECKING:  # pragma: no cover
    from .client import GlobalTags

MAIN_COMMAND = "globaltags"
SHORT_COMMAND = "gt"

_logger = logging.getLogger(__name__)


def _string_option(name: str, description: str, *, required: bool = True) -> dict[str, Any]:
    return {"name": name, "description": description, "type": "string", "required": required}


def _sub_command(name: str, description: str, *options: dict[str, Any]) -> dict[str, Any]:
    return {"name": name, "description": description, "type": "sub_command", "options": list(options)}


def not_found(name: str) -> str:
    return f"{name} does not exist!"


def mention(user_id: str) -> str:
    return f"<@{user_id}>"


class CommandDispatcher:
    """Maps sub-commands to tag and generation client calls.

    Handlers reply through the host. ``show`` and ``gt`` return a
    :class:`MessagePayload` instead, which the host sends as the user's own
    message.
    """

    def __init__(self, client: "GlobalTags", host: ChatHost) -> None:
        self.client = client
        self.host = host
        self._handlers: dict[str, Callable[[Sequence[CommandOption], str], Optional[MessagePayload]]] = {
            "create": self.create,
            "delete": self.delete,
            "show": self.show,
            "who": self.who,
            "list": self.list,
            "prompt": self.prompt,
        }

    def definitions(self) -> list[dict[str, Any]]:
        """Command declarations for host registration."""
        sub_commands = [
            _sub_command(
                "create",
                "Create a new tag",
                _string_option("tag_name", "The name of the tag to create"),
                _string_option("tag_message", "The message content for this tag"),
            ),
            _sub_command("delete", "Delete one of your tags", _string_option("tag_name", "The name of the tag to delete")),
            _sub_command("show", "Show a tag's content", _string_option("tag_name", "The name of the tag to display")),
            _sub_command("who", "Check who owns a tag", _string_option("tag_name", "The name of the tag to check")),
            _sub_command("list", "List all tags from a user", _string_option("user", "User ID to list tags for")),
        ]
        if self.client.generation is not None:
            sub_commands.append(
                _sub_command(
                    "prompt",
                    "Prompt the text-generation server",
                    _string_option("prompt", "What to prompt the model with"),
                    {
                        "name": "send",
                        "description": "Send the response as your message instead of privately",
                        "type": "boolean",
                        "required": False,
                    },
                )
            )
        return [
            {
                "name": MAIN_COMMAND,
                "description": "Manage global tags stored on a server",
                "options": sub_commands,
            },
            {
                "name": SHORT_COMMAND,
                "description": "Fetches a tag with the provided name",
                "options": [_string_option("tag_name", "Tag Name")],
            },
        ]

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------
    def execute(self, args: Sequence[CommandOption], channel_id: str) -> Optional[MessagePayload]:
        """Run ``/globaltags``; ``args[0]`` is the chosen sub-command."""
        sub_command = args[0] if args else None
        name = sub_command.get("name", "") if sub_command else ""
        handler = self._handlers.get(name)
        if handler is None:
            self._reply(channel_id, "Invalid sub-command", ephemeral=True)
            return None
        return handler(sub_command.get("options") or [], channel_id)

    def execute_short(self, args: Sequence[CommandOption], channel_id: str) -> Optional[MessagePayload]:
        """Run ``/gt <tag_name>``."""
        return self.show(args, channel_id)

    # ------------------------------------------------------------------
    # Sub-commands
    # ------------------------------------------------------------------
    def create(self, options: Sequence[CommandOption], channel_id: str) -> None:
        name = find_option(options, "tag_name", "")
        message = find_option(options, "tag_message", "")

        if self.client.tags.fetch(name) is not None:
            self._reply(channel_id, f"'{name}' already exists!")
            return None

        user = self.host.current_user()
        result = self.client.tags.create(
            {"name": name, "message": message, "owner": user["username"], "owner_id": user["id"]}
        )
        if result.get("success"):
            self._reply(channel_id, f"'{name}' created successfully!")
        else:
            self._reply(channel_id, f"Failed to create tag: {result.get('error') or 'Unknown error'}")
        return None

    def delete(self, options: Sequence[CommandOption], channel_id: str) -> None:
        name = find_option(options, "tag_name", "")

        tag = self.client.tags.fetch(name)
        if tag is None:
            self._reply(channel_id, f"'{name}' does not exist!")
            return None

        if tag["owner_id"] != self.host.current_user()["id"]:
            self._reply(channel_id, f"Tag '{name}' is owned by {mention(tag['owner_id'])}!")
            return None

        result = self.client.tags.delete(name)
        if result.get("success"):
            self._reply(channel_id, f"'{name}' deleted successfully!")
        else:
            self._reply(channel_id, f"Failed to delete tag: {result.get('error') or 'Unknown error'}")
        return None

    def show(self, options: Sequence[CommandOption], channel_id: str) -> Optional[MessagePayload]:
        name = find_option(options, "tag_name", "")
        tag = self._lookup(name, channel_id)
        if tag is None:
            return None
        return {"content": tag["message"]}

    def who(self, options: Sequence[CommandOption], channel_id: str) -> None:
        name = find_option(options, "tag_name", "")
        tag = self._lookup(name, channel_id)
        if tag is not None:
            self._reply(channel_id, f"{name} is owned by {mention(tag['owner_id'])}", ephemeral=True)
        return None

    def list(self, options: Sequence[CommandOption], channel_id: str) -> None:
        user_id = find_option(options, "user", "")
        tags = self.client.tags.list(user_id)
        if not tags:
            self._reply(channel_id, f"No tags found for {mention(user_id)}", ephemeral=True)
        else:
            self._reply(channel_id, format_tag_list(tags), ephemeral=True)
        return None

    def prompt(self, options: Sequence[CommandOption], channel_id: str) -> None:
        generation = self.client.generation
        if generation is None:
            self._reply(channel_id, "Invalid sub-command", ephemeral=True)
            return None

        text = find_option(options, "prompt", "")
        send = bool(find_option(options, "send", False))

        response = generation.generate(text)
        if not response:
            self._reply(channel_id, "Failed to generate a response", ephemeral=True)
        elif send:
            self.host.send_message(channel_id, response)
        else:
            self._reply(channel_id, response, ephemeral=True)
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _lookup(self, name: str, channel_id: str) -> Optional[TagResponse]:
        tag = self.client.tags.fetch(name)
        if tag is None:
            self._reply(channel_id, not_found(name), ephemeral=True)
        return tag

    def _reply(self, channel_id: str, content: str, *, ephemeral: bool = False) -> None:
        _logger.debug("Replying in %s (ephemeral=%s): %s", channel_id, ephemeral, content)
        self.host.send_bot_message(channel_id, content, ephemeral=ephemeral)


__all__ = ["CommandDispatcher", "MAIN_COMMAND", "SHORT_COMMAND"]

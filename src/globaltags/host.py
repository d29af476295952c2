"""The chat-host surface the extension is embedded in.

The host owns command registration, message sending, notices and the
current user. The extension only relies on the shapes defined here.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence
from typing_extensions import NotRequired, TypedDict


class User(TypedDict):
    id: str
    username: str


class CommandOption(TypedDict):
    """One argument (or sub-command) as handed over by the host."""
    name: str
    value: NotRequired[Any]
    options: NotRequired[list["CommandOption"]]


class MessagePayload(TypedDict):
    """Returned from a command when its result should be sent as the user's message."""
    content: str


class ChatHost(Protocol):
    def current_user(self) -> User: ...

    def send_message(self, channel_id: str, content: str) -> None:
        """Send ``content`` as a normal message from the user."""

    def send_bot_message(self, channel_id: str, content: str, *, ephemeral: bool = False) -> None:
        """Post a local bot message; ``ephemeral`` keeps it visible to the requester only."""

    def show_notice(self, message: str) -> None: ...


def find_option(options: Sequence[CommandOption] | None, name: str, default: Any = None) -> Any:
    """Return the value of option ``name``, or ``default`` if it was not given."""
    for option in options or ():
        if option.get("name") == name:
            return option.get("value", default)
    return default


__all__ = ["ChatHost", "CommandOption", "MessagePayload", "User", "find_option"]

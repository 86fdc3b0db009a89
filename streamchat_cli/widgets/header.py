"""Chat header showing the title and description set by directives."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

from streamchat_cli.composer import DEFAULT_TITLE


class ChatHeader(Static):
    """One-line header: bold title followed by the italic description."""

    DEFAULT_CSS = """
    ChatHeader {
        height: 1;
        dock: top;
        padding: 0 1;
        background: $surface;
    }
    """

    chat_title: reactive[str] = reactive(DEFAULT_TITLE, init=False)
    chat_description: reactive[str] = reactive("", init=False)

    def __init__(self, title: str = DEFAULT_TITLE, description: str = "", **kwargs: Any) -> None:
        """Initialize the header.

        Args:
            title: Initial chat title
            description: Initial chat description
            **kwargs: Additional arguments passed to parent
        """
        super().__init__(self._format(title, description), **kwargs)
        self.set_reactive(ChatHeader.chat_title, title)
        self.set_reactive(ChatHeader.chat_description, description)

    @staticmethod
    def _format(title: str, description: str) -> Text:
        text = Text(title, style="bold")
        if description:
            text.append("  ")
            text.append(description, style="italic dim")
        return text

    def watch_chat_title(self, new_value: str) -> None:
        """Re-render when the title changes."""
        self.update(self._format(new_value, self.chat_description))

    def watch_chat_description(self, new_value: str) -> None:
        """Re-render when the description changes."""
        self.update(self._format(self.chat_title, new_value))

    def set_metadata(self, title: str, description: str) -> None:
        """Update both fields at once."""
        self.chat_title = title
        self.chat_description = description

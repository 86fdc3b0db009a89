"""Message widgets for streamchat-cli."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.widgets import Static

from streamchat_cli.config import COLORS


class UserMessage(Static):
    """Widget displaying a finalized chat message."""

    DEFAULT_CSS = """
    UserMessage {
        height: auto;
        padding: 0 1;
        margin: 0 0 1 0;
        background: $surface;
        border-left: thick $primary;
    }

    UserMessage.mentioned {
        background: $warning 20%;
        border-left: thick $warning;
    }
    """

    def __init__(self, content: str, *, highlighted: bool = False, **kwargs: Any) -> None:
        """Initialize a chat message.

        Args:
            content: The finalized message text
            highlighted: Whether the message mentions the local user
            **kwargs: Additional arguments passed to parent
        """
        # Use Text object to combine styled prefix with unstyled user content
        text = Text()
        text.append("> ", style=f"bold {COLORS['primary']}")
        text.append(content)
        super().__init__(text, **kwargs)
        if highlighted:
            self.add_class("mentioned")


class ErrorMessage(Static):
    """Widget displaying an error message."""

    DEFAULT_CSS = """
    ErrorMessage {
        height: auto;
        padding: 1;
        margin: 1 0;
        background: #7f1d1d;
        color: white;
        border-left: thick $error;
    }
    """

    def __init__(self, error: str, **kwargs: Any) -> None:
        """Initialize an error message.

        Args:
            error: The error message
            **kwargs: Additional arguments passed to parent
        """
        text = Text("Error: ", style="bold red")
        text.append(error)
        super().__init__(text, **kwargs)


class SystemMessage(Static):
    """Widget displaying a system message."""

    DEFAULT_CSS = """
    SystemMessage {
        height: auto;
        padding: 0 1;
        margin: 0 0 1 0;
        color: $text-muted;
        text-style: italic;
    }
    """

    def __init__(self, message: str, **kwargs: Any) -> None:
        """Initialize a system message.

        Args:
            message: The system message
            **kwargs: Additional arguments passed to parent
        """
        # Use Text object to safely render message without markup parsing
        super().__init__(Text(message, style="dim italic"), **kwargs)

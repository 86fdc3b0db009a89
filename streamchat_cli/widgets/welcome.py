"""Welcome banner widget for streamchat-cli."""

from __future__ import annotations

from typing import Any

from rich.markup import escape
from textual.widgets import Static

from streamchat_cli.config import COLORS, STREAMCHAT_ASCII


class WelcomeBanner(Static):
    """Welcome banner displayed at startup."""

    DEFAULT_CSS = """
    WelcomeBanner {
        height: auto;
        padding: 1;
        margin-bottom: 1;
    }
    """

    def __init__(self, username: str | None = None, **kwargs: Any) -> None:
        """Initialize the welcome banner.

        Args:
            username: Local user's name, shown when set
            **kwargs: Additional arguments passed to parent
        """
        color = COLORS["primary"]
        banner_text = f"[bold {color}]{STREAMCHAT_ASCII}[/bold {color}]\n"
        if username:
            banner_text += f"[{color}]Chatting as[/{color}] [bold]@{escape(username)}[/bold]\n"
        banner_text += "[dim]Enter send • @ mention (Tab) • : emoji (arrows, Enter) • / commands[/dim]"
        super().__init__(banner_text, **kwargs)

"""Status bar widget for streamchat-cli."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.app import ComposeResult

_MODE_LABELS = {
    "mention": "MENTION",
    "emoji": "EMOJI",
    "command": "CMD",
}


class StatusBar(Horizontal):
    """Status bar showing the completion mode, roster size and a status message."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        dock: bottom;
        background: $surface;
        padding: 0 1;
    }

    StatusBar .status-mode {
        width: auto;
        padding: 0 1;
    }

    StatusBar .status-mode.none {
        display: none;
    }

    StatusBar .status-mode.mention {
        background: #f59e0b;
        color: black;
        text-style: bold;
    }

    StatusBar .status-mode.emoji {
        background: #ff1493;
        color: white;
        text-style: bold;
    }

    StatusBar .status-mode.command {
        background: #8b5cf6;
        color: white;
    }

    StatusBar .status-message {
        width: 1fr;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-roster {
        width: auto;
        padding: 0 1;
        color: $text-muted;
    }
    """

    mode: reactive[str] = reactive("none", init=False)
    status_message: reactive[str] = reactive("", init=False)
    roster_size: reactive[int] = reactive(0, init=False)

    def __init__(self, roster_size: int = 0, **kwargs: Any) -> None:
        """Initialize the status bar.

        Args:
            roster_size: Number of known users at startup
            **kwargs: Additional arguments passed to parent
        """
        super().__init__(**kwargs)
        self._initial_roster_size = roster_size

    def compose(self) -> ComposeResult:
        """Compose the status bar layout."""
        yield Static("", classes="status-mode none", id="mode-indicator")
        yield Static("", classes="status-message", id="status-message")
        yield Static("", classes="status-roster", id="roster-display")

    def on_mount(self) -> None:
        """Set reactive values after mount to trigger watchers safely."""
        self.roster_size = self._initial_roster_size

    def watch_mode(self, mode: str) -> None:
        """Update mode indicator when mode changes."""
        try:
            indicator = self.query_one("#mode-indicator", Static)
        except NoMatches:
            return
        indicator.remove_class("none", *_MODE_LABELS)

        if mode in _MODE_LABELS:
            indicator.update(_MODE_LABELS[mode])
            indicator.add_class(mode)
        else:
            indicator.update("")
            indicator.add_class("none")

    def watch_status_message(self, new_value: str) -> None:
        """Update status message display."""
        try:
            msg_widget = self.query_one("#status-message", Static)
        except NoMatches:
            return
        msg_widget.update(new_value)

    def watch_roster_size(self, new_value: int) -> None:
        """Update the roster count."""
        try:
            display = self.query_one("#roster-display", Static)
        except NoMatches:
            return
        noun = "user" if new_value == 1 else "users"
        display.update(f"{new_value} {noun}")

    def set_mode(self, mode: str) -> None:
        """Set the current completion mode.

        Args:
            mode: One of "none", "mention", "emoji" or "command"
        """
        self.mode = mode

    def set_status_message(self, message: str) -> None:
        """Set the status message.

        Args:
            message: Status message to display (empty string to clear)
        """
        self.status_message = message

    def set_roster_size(self, count: int) -> None:
        """Set the number of known users."""
        self.roster_size = count

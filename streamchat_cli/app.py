"""Textual UI application for streamchat-cli."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from textual.app import App
from textual.binding import Binding, BindingType
from textual.containers import Container, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Static  # noqa: TC002 - used at runtime

from streamchat_cli.composer import SubmitOutcome, mentions
from streamchat_cli.roster import Roster, RosterError, load_roster
from streamchat_cli.session import ChatSession
from streamchat_cli.widgets.chat_input import ChatInput
from streamchat_cli.widgets.header import ChatHeader
from streamchat_cli.widgets.messages import ErrorMessage, SystemMessage, UserMessage
from streamchat_cli.widgets.status import StatusBar
from streamchat_cli.widgets.welcome import WelcomeBanner

if TYPE_CHECKING:
    from textual.app import ComposeResult

logger = logging.getLogger(__name__)


class StreamChatApp(App):
    """Main Textual application for streamchat-cli."""

    TITLE = "StreamChat"
    CSS_PATH = "app.tcss"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+c", "quit_or_clear", "Quit", show=False),
        Binding("ctrl+d", "quit_app", "Quit", show=False, priority=True),
        Binding("ctrl+r", "reload_roster", "Reload Roster", show=False),
    ]

    def __init__(
        self,
        *,
        session: ChatSession | None = None,
        username: str | None = None,
        roster_path: str | Path | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the StreamChat application.

        Args:
            session: Pre-configured input session (default: empty roster, built-in catalogs)
            username: Local user's name; messages mentioning it are highlighted
            roster_path: Roster file reloaded by Ctrl+R
            **kwargs: Additional arguments passed to parent
        """
        super().__init__(**kwargs)
        self._session = session or ChatSession()
        self._username = username
        self._roster_path = Path(roster_path) if roster_path else None
        self._header: ChatHeader | None = None
        self._status_bar: StatusBar | None = None
        self._chat_input: ChatInput | None = None
        self._quit_pending = False

    @property
    def session(self) -> ChatSession:
        """The chat input session."""
        return self._session

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        metadata = self._session.metadata
        yield ChatHeader(metadata.title, metadata.description, id="chat-header")

        with VerticalScroll(id="chat"):
            yield WelcomeBanner(self._username, id="welcome-banner")
            yield Container(id="messages")

        with Container(id="bottom-app-container"):
            yield ChatInput(self._session, id="input-area")

        yield StatusBar(roster_size=len(self._session.roster), id="status-bar")

    async def on_mount(self) -> None:
        """Initialize components after mount."""
        self._header = self.query_one("#chat-header", ChatHeader)
        self._status_bar = self.query_one("#status-bar", StatusBar)
        self._chat_input = self.query_one("#input-area", ChatInput)
        self._chat_input.focus_input()

    def _update_status(self, message: str) -> None:
        """Update the status bar with a message."""
        if self._status_bar:
            self._status_bar.set_status_message(message)

    async def on_chat_input_submitted(self, event: ChatInput.Submitted) -> None:
        """Handle submitted input from ChatInput widget."""
        self._quit_pending = False

        if event.outcome is SubmitOutcome.DIRECTIVE:
            await self._handle_directive(event.value)
        elif event.outcome is SubmitOutcome.MESSAGE:
            await self._handle_message()

    def on_chat_input_mode_changed(self, event: ChatInput.ModeChanged) -> None:
        """Update status bar when the completion mode changes."""
        if self._status_bar:
            self._status_bar.set_mode(event.mode)

    async def _handle_directive(self, directive: str) -> None:
        """Refresh the header after /title or /description."""
        metadata = self._session.metadata
        if self._header:
            self._header.set_metadata(metadata.title, metadata.description)
        field = directive.split(maxsplit=1)[0].removeprefix("/")
        await self._mount_message(SystemMessage(f"Chat {field} updated"))

    async def _handle_message(self) -> None:
        """Show the newest message of the log."""
        message = self._session.messages[-1]
        highlighted = bool(self._username) and mentions(message, self._username)
        await self._mount_message(UserMessage(message, highlighted=highlighted))

    async def _mount_message(self, widget: Static) -> None:
        """Mount a message widget to the messages area.

        Args:
            widget: The message widget to mount
        """
        try:
            messages = self.query_one("#messages", Container)
            await messages.mount(widget)
            chat = self.query_one("#chat", VerticalScroll)
            chat.scroll_end(animate=False)
        except NoMatches:
            pass

    async def action_reload_roster(self) -> None:
        """Re-read the roster file; suggestions use it from the next keystroke."""
        if self._roster_path is None:
            self._update_status("No roster file configured")
            return
        try:
            fresh = load_roster(self._roster_path)
        except RosterError as e:
            logger.warning(f"Roster reload failed: {e}")
            await self._mount_message(ErrorMessage(str(e)))
            return

        roster = self._session.roster
        if isinstance(roster, Roster):
            roster.replace(fresh)
        else:
            self._session.roster = fresh
        if self._status_bar:
            self._status_bar.set_roster_size(len(fresh))
        self._update_status(f"Roster reloaded ({len(fresh)} users)")

    def action_quit_or_clear(self) -> None:
        """Handle Ctrl+C - quit on double press."""
        if self._quit_pending:
            self.exit()
        else:
            self._quit_pending = True
            self.notify("Press Ctrl+C again to quit", timeout=3)

    def action_quit_app(self) -> None:
        """Handle quit action (Ctrl+D)."""
        self.exit()


async def run_textual_app(
    *,
    session: ChatSession | None = None,
    username: str | None = None,
    roster_path: str | Path | None = None,
) -> None:
    """Run the Textual application.

    Args:
        session: Pre-configured input session
        username: Local user's name
        roster_path: Roster file reloaded by Ctrl+R
    """
    app = StreamChatApp(session=session, username=username, roster_path=roster_path)
    await app.run_async()

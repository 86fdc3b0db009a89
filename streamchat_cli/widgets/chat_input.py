"""Chat input widget with mention, emoji and command completion."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from rich.text import Text
from textual import events  # noqa: TC002 - used at runtime in _on_key
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Static, TextArea

from streamchat_cli.composer import SubmitOutcome
from streamchat_cli.triggers import TriggerKind
from streamchat_cli.widgets.autocomplete import CompletionController, CompletionResult

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from streamchat_cli.session import ChatSession

# Emoji picker layout: glyphs per row, and columns per " X " cell
EMOJI_COLUMNS = 8
EMOJI_CELL_WIDTH = 4


class CompletionPopup(Static):
    """Popup widget that displays completion suggestions."""

    DEFAULT_CSS = """
    CompletionPopup {
        display: none;
    }
    """

    class Chosen(Message):
        """Message sent when a suggestion is clicked."""

        def __init__(self, index: int) -> None:
            """Initialize with the clicked suggestion index."""
            self.index = index
            super().__init__()

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the completion popup."""
        super().__init__("", **kwargs)
        self.can_focus = False
        self._kind = TriggerKind.NONE
        self._count = 0

    def update_suggestions(
        self,
        suggestions: list[tuple[str, str]],
        selected_index: int | None,
        kind: TriggerKind,
    ) -> None:
        """Update the popup with new suggestions."""
        if not suggestions:
            self.hide()
            return

        self._kind = kind
        self._count = len(suggestions)
        if kind is TriggerKind.EMOJI:
            text = self._render_grid(suggestions, selected_index)
        else:
            text = self._render_rows(suggestions, selected_index)
        self.update(text)
        self.show()

    @staticmethod
    def _render_rows(suggestions: list[tuple[str, str]], selected_index: int | None) -> Text:
        text = Text()
        for idx, (label, description) in enumerate(suggestions):
            if idx:
                text.append("\n")

            if idx == selected_index:
                label_style = "bold reverse"
                desc_style = "italic"
            else:
                label_style = "bold"
                desc_style = "dim"

            text.append(label, style=label_style)
            if description:
                text.append(" - ")
                text.append(description, style=desc_style)
        return text

    @staticmethod
    def _render_grid(suggestions: list[tuple[str, str]], selected_index: int | None) -> Text:
        text = Text()
        for idx, (glyph, _) in enumerate(suggestions):
            if idx and idx % EMOJI_COLUMNS == 0:
                text.append("\n")
            style = "reverse" if idx == selected_index else ""
            text.append(f" {glyph} ", style=style)
        return text

    def on_click(self, event: events.Click) -> None:
        """Translate a click into the index of the clicked suggestion."""
        offset = event.get_content_offset(self)
        if offset is None:
            return
        if self._kind is TriggerKind.EMOJI:
            index = offset.y * EMOJI_COLUMNS + offset.x // EMOJI_CELL_WIDTH
        else:
            index = offset.y
        if 0 <= index < self._count:
            event.stop()
            self.post_message(self.Chosen(index))

    def hide(self) -> None:
        """Hide the popup."""
        self.update("")
        self._count = 0
        self.styles.display = "none"

    def show(self) -> None:
        """Show the popup."""
        self.styles.display = "block"


class ChatTextArea(TextArea):
    """TextArea subclass with custom key handling for chat input."""

    BINDINGS: ClassVar[list[Binding]] = [
        Binding(
            "shift+enter,ctrl+j,alt+enter,ctrl+enter",
            "insert_newline",
            "New Line",
            show=False,
            priority=True,
        ),
        Binding(
            "ctrl+a",
            "select_all_text",
            "Select All",
            show=False,
            priority=True,
        ),
    ]

    # Keys yielded to ChatInput while a list is open
    NAVIGATION_KEYS: ClassVar[frozenset[str]] = frozenset(
        {"up", "down", "left", "right", "enter", "tab", "escape"}
    )
    CHOOSE_KEYS: ClassVar[frozenset[str]] = frozenset({"tab", "escape"})

    class Submitted(Message):
        """Message sent when text is submitted."""

        def __init__(self, value: str) -> None:
            """Initialize with submitted value."""
            self.value = value
            super().__init__()

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the chat text area."""
        super().__init__(**kwargs)
        self._completion_active = False
        self._completion_navigable = False

    def set_completion_active(self, *, active: bool, navigable: bool = False) -> None:
        """Set whether completion suggestions are visible.

        Args:
            active: A suggestion list is showing
            navigable: The list takes arrow keys and Enter
        """
        self._completion_active = active
        self._completion_navigable = active and navigable

    def action_insert_newline(self) -> None:
        """Insert a newline character."""
        self.insert("\n")

    def action_select_all_text(self) -> None:
        """Select all text in the text area."""
        if not self.text:
            return
        lines = self.text.split("\n")
        end_row = len(lines) - 1
        end_col = len(lines[end_row])
        self.selection = ((0, 0), (end_row, end_col))

    async def _on_key(self, event: events.Key) -> None:
        """Handle key events."""
        if event.key in ("shift+enter", "ctrl+j", "alt+enter", "ctrl+enter"):
            event.prevent_default()
            event.stop()
            self.insert("\n")
            return

        # If completion is active, let parent handle the keys the list uses
        yielded = self.NAVIGATION_KEYS if self._completion_navigable else self.CHOOSE_KEYS
        if self._completion_active and event.key in yielded:
            event.prevent_default()
            return

        # Plain Enter submits
        if event.key == "enter":
            event.prevent_default()
            event.stop()
            if self.text.strip():
                self.post_message(self.Submitted(self.text))
            return

        await super()._on_key(event)

    def set_text_silently(self, text: str, offset: int) -> None:
        """Replace the text and cursor without posting change events."""
        with self.prevent(TextArea.Changed, TextArea.SelectionChanged):
            self.text = text
            self.move_cursor(offset_to_location(text, offset))

    def clear_text(self) -> None:
        """Clear the text area."""
        self.set_text_silently("", 0)


def offset_to_location(text: str, offset: int) -> tuple[int, int]:
    """Convert a flat offset into a (row, column) location."""
    offset = max(0, min(offset, len(text)))
    lines = text.split("\n")
    remaining = offset
    for row, line in enumerate(lines):
        if remaining <= len(line):
            return row, remaining
        remaining -= len(line) + 1
    return len(lines) - 1, len(lines[-1])


def location_to_offset(text: str, location: tuple[int, int]) -> int:
    """Convert a (row, column) location into a flat offset."""
    if not text:
        return 0
    lines = text.split("\n")
    row, col = location
    row = max(0, min(row, len(lines) - 1))
    col = max(0, col)
    offset = sum(len(lines[i]) + 1 for i in range(row))
    return offset + min(col, len(lines[row]))


class ChatInput(Vertical):
    """Chat input widget with prompt indicator, completion popup and submit handling.

    Features:
    - Enter to submit, Ctrl+J for newlines
    - @ mention suggestions ranked by edit distance (Tab or click to insert)
    - : emoji picker navigated with arrow keys, Enter to insert
    - / command list (Tab or click to insert)
    """

    DEFAULT_CSS = """
    ChatInput {
        height: auto;
        min-height: 3;
        max-height: 16;
        padding: 0;
        background: $surface;
        border: solid $primary;
    }

    ChatInput .input-row {
        height: auto;
        width: 100%;
    }

    ChatInput .input-prompt {
        width: 3;
        height: 1;
        padding: 0 1;
        color: $primary;
        text-style: bold;
    }

    ChatInput ChatTextArea {
        width: 1fr;
        height: auto;
        min-height: 1;
        max-height: 8;
        border: none;
        background: transparent;
        padding: 0;
    }

    ChatInput ChatTextArea:focus {
        border: none;
    }
    """

    class Submitted(Message):
        """Message sent when input is submitted."""

        def __init__(self, value: str, outcome: SubmitOutcome) -> None:
            """Initialize with the raw value and what the submit did."""
            super().__init__()
            self.value = value
            self.outcome = outcome

    class ModeChanged(Message):
        """Message sent when the trigger kind under the cursor changes."""

        def __init__(self, mode: str) -> None:
            """Initialize with new mode."""
            super().__init__()
            self.mode = mode

    mode: reactive[str] = reactive(TriggerKind.NONE.value)

    def __init__(self, session: ChatSession, **kwargs: Any) -> None:
        """Initialize the chat input widget.

        Args:
            session: Input session driving completion and submission
            **kwargs: Additional arguments for parent
        """
        super().__init__(**kwargs)
        self._session = session
        self._text_area: ChatTextArea | None = None
        self._popup: CompletionPopup | None = None
        self._completion: CompletionController | None = None

    def compose(self) -> ComposeResult:
        """Compose the chat input layout."""
        with Horizontal(classes="input-row"):
            yield Static(">", classes="input-prompt", id="prompt")
            yield ChatTextArea(id="chat-input")

        yield CompletionPopup(id="completion-popup")

    def on_mount(self) -> None:
        """Initialize components after mount."""
        self._text_area = self.query_one("#chat-input", ChatTextArea)
        self._popup = self.query_one("#completion-popup", CompletionPopup)
        self._completion = CompletionController(self._session, self)
        self._text_area.focus()

    def _sync_session(self) -> None:
        if not self._completion or not self._text_area:
            return
        self._completion.on_text_changed(self._text_area.text, self._get_cursor_offset())
        self.mode = self._session.context.kind.value

    def on_text_area_changed(self, event: TextArea.Changed) -> None:  # noqa: ARG002
        """Update completions when the text changes."""
        self._sync_session()

    def on_text_area_selection_changed(
        self,
        event: TextArea.SelectionChanged,  # noqa: ARG002
    ) -> None:
        """Update completions when the cursor moves."""
        self._sync_session()

    def on_chat_text_area_submitted(self, event: ChatTextArea.Submitted) -> None:
        """Handle text submission."""
        event.stop()
        self._submit()

    def on_completion_popup_chosen(self, event: CompletionPopup.Chosen) -> None:
        """Insert a clicked suggestion."""
        event.stop()
        if self._completion:
            self._completion.choose(event.index)
        self.focus_input()

    async def on_key(self, event: events.Key) -> None:
        """Handle key events for completion navigation."""
        if not self._completion or not self._text_area:
            return

        result = self._completion.on_key(event)

        match result:
            case CompletionResult.HANDLED:
                event.prevent_default()
                event.stop()
            case CompletionResult.IGNORED if event.key == "enter":
                event.prevent_default()
                event.stop()
                self._submit()

    def _submit(self) -> None:
        """Submit the session buffer and clear the input."""
        value = self._session.text
        outcome = self._session.on_submit()
        if outcome is SubmitOutcome.IGNORED:
            return
        if self._text_area:
            self._text_area.clear_text()
        self.clear_completion_suggestions()
        self.mode = TriggerKind.NONE.value
        self.post_message(self.Submitted(value, outcome))

    def _get_cursor_offset(self) -> int:
        """Get the cursor offset as a single integer."""
        if not self._text_area:
            return 0
        return location_to_offset(self._text_area.text, self._text_area.cursor_location)

    def watch_mode(self, mode: str) -> None:
        """Post mode changed message when mode changes."""
        self.post_message(self.ModeChanged(mode))

    def focus_input(self) -> None:
        """Focus the input field."""
        if self._text_area:
            self._text_area.focus()

    # =========================================================================
    # CompletionView protocol implementation
    # =========================================================================

    def render_completion_suggestions(
        self,
        suggestions: list[tuple[str, str]],
        selected_index: int | None,
        kind: TriggerKind,
    ) -> None:
        """Render completion suggestions in the popup."""
        if self._popup:
            self._popup.update_suggestions(suggestions, selected_index, kind)
        # Tell TextArea that completion is active so it yields navigation keys
        if self._text_area:
            self._text_area.set_completion_active(
                active=bool(suggestions), navigable=self._session.is_navigable
            )

    def clear_completion_suggestions(self) -> None:
        """Clear/hide the completion popup."""
        if self._popup:
            self._popup.hide()
        if self._text_area:
            self._text_area.set_completion_active(active=False)

    def set_input_text(self, text: str, cursor: int) -> None:
        """Replace the input text after a completion was inserted."""
        if self._text_area:
            self._text_area.set_text_silently(text, cursor)
        self.mode = self._session.context.kind.value

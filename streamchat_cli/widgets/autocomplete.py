"""Completion controller for @ mentions, : emoji and / commands.

Translates key events from the chat input into ``ChatSession`` events and
pushes the resulting suggestion list to a view.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from streamchat_cli.navigator import Direction
from streamchat_cli.triggers import TriggerKind

if TYPE_CHECKING:
    from textual import events

    from streamchat_cli.session import ChatSession

logger = logging.getLogger(__name__)


class CompletionResult(StrEnum):
    """Result of handling a key event in the completion system."""

    IGNORED = "ignored"  # Key not handled, let default behavior proceed
    HANDLED = "handled"  # Key handled, prevent default


class CompletionView(Protocol):
    """Protocol for views that can display completion suggestions."""

    def render_completion_suggestions(
        self,
        suggestions: list[tuple[str, str]],
        selected_index: int | None,
        kind: TriggerKind,
    ) -> None:
        """Render the completion suggestions popup.

        Args:
            suggestions: List of (label, description) tuples
            selected_index: Index of the highlighted item, None if not keyboard-driven
            kind: Trigger kind the list belongs to
        """
        ...

    def clear_completion_suggestions(self) -> None:
        """Hide/clear the completion suggestions popup."""
        ...

    def set_input_text(self, text: str, cursor: int) -> None:
        """Replace the input text and move the cursor.

        Args:
            text: New input text
            cursor: New cursor offset
        """
        ...


NEXT_KEYS = frozenset({"right", "down"})
PREVIOUS_KEYS = frozenset({"left", "up"})


class CompletionController:
    """Drives a ``ChatSession`` from key events and renders its suggestion list."""

    def __init__(self, session: ChatSession, view: CompletionView) -> None:
        """Initialize the controller.

        Args:
            session: Session holding the input state
            view: View to render suggestions to
        """
        self._session = session
        self._view = view

    @property
    def session(self) -> ChatSession:
        """The driven session."""
        return self._session

    @property
    def is_active(self) -> bool:
        """Whether a suggestion list is showing."""
        return bool(self._session.suggestions)

    def on_text_changed(self, text: str, cursor_index: int) -> None:
        """Update suggestions when the text or cursor changes."""
        self._session.on_text_change(text, cursor_index)
        self._render()

    def on_key(self, event: events.Key) -> CompletionResult:
        """Handle key events for navigation and selection."""
        if not self.is_active:
            return CompletionResult.IGNORED

        match event.key:
            case key if key in NEXT_KEYS:
                return self._move(Direction.NEXT)
            case key if key in PREVIOUS_KEYS:
                return self._move(Direction.PREVIOUS)
            case "enter":
                if self._session.on_commit_key():
                    self._push_text()
                    return CompletionResult.HANDLED
                return CompletionResult.IGNORED
            case "tab":
                self.choose(self._session.selected_index or 0)
                return CompletionResult.HANDLED
            case "escape":
                self.reset()
                return CompletionResult.HANDLED
            case _:
                return CompletionResult.IGNORED

    def choose(self, index: int) -> bool:
        """Insert the suggestion at ``index`` (click or Tab).

        Returns:
            True if a suggestion was inserted
        """
        try:
            self._session.on_choose_suggestion(index)
        except (IndexError, ValueError) as e:
            logger.warning(f"Could not apply completion {index}: {e}")
            self._render()
            return False
        self._push_text()
        return True

    def reset(self) -> None:
        """Close any open list."""
        if self._session.dismiss():
            self._view.clear_completion_suggestions()

    def _move(self, direction: Direction) -> CompletionResult:
        if self._session.on_directional_key(direction):
            self._render()
            return CompletionResult.HANDLED
        return CompletionResult.IGNORED

    def _push_text(self) -> None:
        self._view.set_input_text(self._session.text, self._session.cursor)
        self._render()

    def _render(self) -> None:
        suggestions = self._session.suggestions
        if not suggestions:
            self._view.clear_completion_suggestions()
            return
        selected = self._session.selected_index if self._session.is_navigable else None
        self._view.render_completion_suggestions(
            [(s.label, s.description) for s in suggestions],
            selected,
            self._session.context.kind,
        )

"""Input session tying trigger detection, suggestions, selection and submit together.

The host feeds it the events it sees (text changes, arrow keys, Enter,
clicks on a suggestion) and renders whatever state it exposes. Everything runs
synchronously inside the host's event handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from streamchat_cli.catalogs import EMOJI_CATALOG, SLASH_COMMANDS
from streamchat_cli.composer import ChatMetadata, MessageComposer, SubmitOutcome
from streamchat_cli.navigator import Direction, SelectionNavigator
from streamchat_cli.roster import Roster
from streamchat_cli.splicer import splice
from streamchat_cli.suggestions import Suggestion, suggest
from streamchat_cli.triggers import NO_TRIGGER, TriggerContext, TriggerKind, detect

if TYPE_CHECKING:
    from collections.abc import Sequence

    from streamchat_cli.catalogs import CommandEntry, EmojiEntry
    from streamchat_cli.roster import RosterEntry

logger = logging.getLogger(__name__)

# Only the emoji picker is driven by arrow keys and Enter; mention and command
# lists are committed by choosing an entry.
KEYBOARD_NAVIGABLE = frozenset({TriggerKind.EMOJI})


class ChatSession:
    """State of one chat input: buffer, trigger context, open list and message log."""

    def __init__(
        self,
        roster: Sequence[RosterEntry] | Roster | None = None,
        emoji_catalog: Sequence[EmojiEntry] = EMOJI_CATALOG,
        command_catalog: Sequence[CommandEntry] = SLASH_COMMANDS,
        composer: MessageComposer | None = None,
        *,
        filter_emoji: bool = False,
        filter_commands: bool = False,
    ) -> None:
        """Initialize the session.

        Args:
            roster: Known users; read again on every text change
            emoji_catalog: Emoji entries in picker order
            command_catalog: Slash commands in picker order
            composer: Message composer (default: one using ``emoji_catalog``)
            filter_emoji: Filter the emoji list by the typed shortcode
            filter_commands: Filter the command list by the typed command
        """
        self.roster = roster if roster is not None else Roster()
        self._emoji_catalog = emoji_catalog
        self._command_catalog = command_catalog
        self._composer = composer or MessageComposer(emoji_catalog)
        self._filter_emoji = filter_emoji
        self._filter_commands = filter_commands

        self._text = ""
        self._cursor = 0
        self._context: TriggerContext = NO_TRIGGER
        self._suggestions: list[Suggestion] = []
        self._list_identity: tuple[TriggerKind, tuple[str, ...]] | None = None
        self._navigator = SelectionNavigator()

    # =========================================================================
    # Exposed state
    # =========================================================================

    @property
    def text(self) -> str:
        """Current input buffer."""
        return self._text

    @property
    def cursor(self) -> int:
        """Current cursor offset."""
        return self._cursor

    @property
    def context(self) -> TriggerContext:
        """Trigger context for the current text and cursor."""
        return self._context

    @property
    def suggestions(self) -> tuple[Suggestion, ...]:
        """Suggestions of the open list, empty when no list is open."""
        if not self._navigator.is_open:
            return ()
        return tuple(self._suggestions)

    @property
    def selected_index(self) -> int | None:
        """Highlighted index in the open list, None when closed."""
        return self._navigator.index

    @property
    def is_navigable(self) -> bool:
        """Whether the open list takes arrow keys and Enter."""
        return self._navigator.is_open and self._context.kind in KEYBOARD_NAVIGABLE

    @property
    def metadata(self) -> ChatMetadata:
        """Chat title and description."""
        return self._composer.metadata

    @property
    def messages(self) -> tuple[str, ...]:
        """Finalized message log."""
        return self._composer.messages

    # =========================================================================
    # Host events
    # =========================================================================

    def on_text_change(self, text: str, cursor: int) -> None:
        """Recompute the trigger context and suggestion list.

        Args:
            text: New input buffer
            cursor: New cursor offset
        """
        cursor = max(0, min(cursor, len(text)))
        if text == self._text and cursor == self._cursor:
            return

        self._text = text
        self._cursor = cursor

        context = detect(text, cursor)
        if context.kind != self._context.kind:
            logger.debug(f"Trigger context: {self._context.kind} -> {context.kind}")
        self._context = context

        suggestions = suggest(
            context,
            list(self.roster),
            self._emoji_catalog,
            self._command_catalog,
            filter_emoji=self._filter_emoji,
            filter_commands=self._filter_commands,
        )
        identity = (context.kind, tuple(s.label for s in suggestions))

        if not suggestions:
            self._close()
            return

        # Keep the highlight while the same list stays open; any other list
        # starts over from the first entry
        if identity != self._list_identity or not self._navigator.is_open:
            self._navigator.open(len(suggestions))
        self._suggestions = suggestions
        self._list_identity = identity

    def on_directional_key(self, direction: Direction) -> bool:
        """Move the highlight in the emoji list.

        Returns:
            True if the key was consumed, False if the host should handle it
        """
        if not self.is_navigable:
            return False
        return self._navigator.move(direction)

    def on_commit_key(self) -> bool:
        """Insert the highlighted emoji.

        Returns:
            True if an emoji was inserted, False if the host should treat the
            key as a submit
        """
        if not self.is_navigable:
            return False
        index = self._navigator.commit()
        if index is None:
            return False
        self._apply(self._suggestions[index])
        return True

    def on_choose_suggestion(self, index: int) -> tuple[str, int]:
        """Insert the entry at ``index`` of the open list.

        Args:
            index: Position in ``suggestions``

        Returns:
            Tuple of (new text, new cursor)

        Raises:
            IndexError: If no list is open or ``index`` is out of range
        """
        suggestions = self.suggestions
        if not 0 <= index < len(suggestions):
            msg = f"No suggestion at index {index} (open list has {len(suggestions)})"
            raise IndexError(msg)
        self._navigator.close()
        self._apply(suggestions[index])
        return self._text, self._cursor

    def on_submit(self) -> SubmitOutcome:
        """Submit the buffer as a message or directive and clear it."""
        outcome = self._composer.submit(self._text)
        if outcome is not SubmitOutcome.IGNORED:
            self._text = ""
            self._cursor = 0
            self._context = NO_TRIGGER
            self._close()
        return outcome

    def dismiss(self) -> bool:
        """Close the open list without inserting anything.

        Returns:
            True if a list was open
        """
        was_open = self._navigator.is_open
        self._close()
        return was_open

    # =========================================================================
    # Internals
    # =========================================================================

    def _close(self) -> None:
        self._navigator.close()
        self._suggestions = []
        self._list_identity = None

    def _apply(self, suggestion: Suggestion) -> None:
        """Splice a suggestion into the buffer and close the list."""
        context = self._context
        token_start = getattr(context, "token_start", 0)
        self._text, self._cursor = splice(
            self._text, token_start, self._cursor, suggestion.value, context.kind
        )
        self._context = detect(self._text, self._cursor)
        self._close()
        logger.debug(f"Inserted {context.kind} completion {suggestion.label!r}")

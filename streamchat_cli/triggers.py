"""Detection of the completion trigger under the cursor.

Three triggers are recognized, checked in a fixed order where the first match
wins:

1. ``/`` at the start of the input opens command completion for the whole line.
2. ``@`` in the word ending at the cursor opens mention completion.
3. An unclosed ``:`` in the word ending at the cursor opens emoji completion.

A command line never opens mention or emoji lists, so ``/ban @alice`` stays a
command context wherever the cursor sits.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

MENTION_SIGIL = "@"
EMOJI_SIGIL = ":"
COMMAND_SIGIL = "/"
ESCAPE_CHAR = "\\"


class TriggerKind(StrEnum):
    """Kind of inline completion being typed."""

    NONE = "none"
    MENTION = "mention"
    EMOJI = "emoji"
    COMMAND = "command"


@dataclass(frozen=True)
class NoTrigger:
    """No completion is active."""

    kind: ClassVar[TriggerKind] = TriggerKind.NONE


@dataclass(frozen=True)
class MentionTrigger:
    """An ``@`` mention is being typed.

    ``token_start`` is the offset of the ``@`` itself.
    """

    partial_token: str
    token_start: int
    kind: ClassVar[TriggerKind] = TriggerKind.MENTION


@dataclass(frozen=True)
class EmojiTrigger:
    """An emoji shortcode is being typed.

    ``token_start`` is the offset of the unclosed ``:``.
    """

    partial_token: str
    token_start: int
    kind: ClassVar[TriggerKind] = TriggerKind.EMOJI


@dataclass(frozen=True)
class CommandTrigger:
    """A slash command is being typed; it always spans from offset 0."""

    partial_token: str
    kind: ClassVar[TriggerKind] = TriggerKind.COMMAND

    @property
    def token_start(self) -> int:
        """Commands always start at the beginning of the input."""
        return 0


TriggerContext = NoTrigger | MentionTrigger | EmojiTrigger | CommandTrigger

NO_TRIGGER = NoTrigger()


def _word_start(text: str, cursor: int) -> int:
    """Return the offset where the whitespace-free run ending at cursor begins."""
    start = cursor
    while start > 0 and not text[start - 1].isspace():
        start -= 1
    return start


def _find_mention(text: str, word_start: int, cursor: int) -> int:
    """Return the offset of the nearest unescaped ``@`` in the word, or -1."""
    for idx in range(cursor - 1, word_start - 1, -1):
        if text[idx] != MENTION_SIGIL:
            continue
        if idx > 0 and text[idx - 1] == ESCAPE_CHAR:
            # Escaped sigil ends the search; the run before it is literal text
            return -1
        return idx
    return -1


def _find_open_colon(text: str, word_start: int, cursor: int) -> int:
    """Return the offset of the last unmatched ``:`` in the word, or -1."""
    word = text[word_start:cursor]
    if word.count(EMOJI_SIGIL) % 2 == 0:
        return -1
    return word_start + word.rindex(EMOJI_SIGIL)


def detect(text: str, cursor: int) -> TriggerContext:
    """Classify the editing context at ``cursor``.

    Args:
        text: Full input buffer
        cursor: Cursor offset into ``text``; out-of-range values are clamped

    Returns:
        The active trigger context, ``NO_TRIGGER`` when nothing applies
    """
    cursor = max(0, min(cursor, len(text)))

    if text.startswith(COMMAND_SIGIL):
        return CommandTrigger(partial_token=text[:cursor])

    word_start = _word_start(text, cursor)

    at_index = _find_mention(text, word_start, cursor)
    if at_index >= 0:
        return MentionTrigger(partial_token=text[at_index + 1 : cursor], token_start=at_index)

    colon_index = _find_open_colon(text, word_start, cursor)
    if colon_index >= 0:
        return EmojiTrigger(partial_token=text[colon_index + 1 : cursor], token_start=colon_index)

    return NO_TRIGGER

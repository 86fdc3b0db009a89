"""Message submission: directives, mention and shortcode substitution."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from streamchat_cli.catalogs import EMOJI_CATALOG, EmojiEntry, find_emoji

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Chat"

TITLE_DIRECTIVE = "/title "
DESCRIPTION_DIRECTIVE = "/description "

_MENTION_RE = re.compile(r"(?<!\\)@(\w+)", re.ASCII)
_SHORTCODE_RE = re.compile(r":([^:\s]+):")


class SubmitOutcome(StrEnum):
    """What a submit did with the buffer."""

    IGNORED = "ignored"  # Blank input, nothing happened
    DIRECTIVE = "directive"  # Chat metadata updated
    MESSAGE = "message"  # Message appended to the log


@dataclass
class ChatMetadata:
    """Header information for the chat, changed only by directives."""

    title: str = DEFAULT_TITLE
    description: str = ""


def strip_mentions(text: str) -> str:
    """Drop the ``@`` sigil from every ``@word`` token not escaped as ``\\@``."""
    return _MENTION_RE.sub(r"\1", text)


def replace_shortcodes(text: str, catalog: Sequence[EmojiEntry]) -> str:
    """Replace known ``:name:`` shortcodes with their glyphs.

    Unknown shortcodes are left exactly as typed.
    """

    def _sub(match: re.Match[str]) -> str:
        entry = find_emoji(catalog, match.group(1))
        return entry.glyph if entry else match.group(0)

    return _SHORTCODE_RE.sub(_sub, text)


def mentions(message: str, username: str) -> bool:
    """Check whether a finalized message names ``username`` as a whole word."""
    if not username:
        return False
    return re.search(rf"(?<!\w){re.escape(username)}(?!\w)", message) is not None


class MessageComposer:
    """Turns submitted input into chat metadata changes or log entries.

    The log is append-only; entries are never edited after insertion.
    """

    def __init__(self, emoji_catalog: Sequence[EmojiEntry] = EMOJI_CATALOG) -> None:
        """Initialize the composer.

        Args:
            emoji_catalog: Catalog used to resolve ``:shortcode:`` tokens
        """
        self._emoji_catalog = emoji_catalog
        self._messages: list[str] = []
        self.metadata = ChatMetadata()

    @property
    def messages(self) -> tuple[str, ...]:
        """Finalized messages, oldest first."""
        return tuple(self._messages)

    def finalize(self, text: str) -> str:
        """Apply mention and shortcode substitution to a message body."""
        return replace_shortcodes(strip_mentions(text), self._emoji_catalog)

    def submit(self, buffer: str) -> SubmitOutcome:
        """Submit the input buffer.

        ``/title <text>`` and ``/description <text>`` update the chat metadata.
        Anything else is finalized and appended to the message log. Other slash
        commands have no effect of their own and are posted as plain text.

        Args:
            buffer: Raw input text

        Returns:
            What happened to the buffer
        """
        if not buffer.strip():
            return SubmitOutcome.IGNORED

        if buffer.startswith(TITLE_DIRECTIVE):
            self.metadata.title = buffer.removeprefix(TITLE_DIRECTIVE).strip()
            logger.debug(f"Chat title set to {self.metadata.title!r}")
            return SubmitOutcome.DIRECTIVE

        if buffer.startswith(DESCRIPTION_DIRECTIVE):
            self.metadata.description = buffer.removeprefix(DESCRIPTION_DIRECTIVE).strip()
            logger.debug(f"Chat description set to {self.metadata.description!r}")
            return SubmitOutcome.DIRECTIVE

        self._messages.append(self.finalize(buffer))
        return SubmitOutcome.MESSAGE

"""Suggestion lists for the active trigger context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from streamchat_cli.ranking import rank
from streamchat_cli.triggers import (
    CommandTrigger,
    EmojiTrigger,
    MentionTrigger,
    TriggerContext,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from streamchat_cli.catalogs import CommandEntry, EmojiEntry
    from streamchat_cli.roster import RosterEntry

MAX_MENTION_SUGGESTIONS = 3
MAX_EMOJI_SUGGESTIONS = 40


@dataclass(frozen=True)
class Suggestion:
    """One entry of a suggestion list.

    ``label`` is what the picker shows; ``value`` is what gets spliced in.
    """

    label: str
    value: str
    description: str = ""


def _mention_suggestions(token: str, roster: Sequence[RosterEntry]) -> list[Suggestion]:
    # Empty token: nothing typed after @ yet, so nothing to rank against
    usernames = [entry.username for entry in roster]
    return [
        Suggestion(label=f"@{name}", value=name)
        for name in rank(token, usernames, MAX_MENTION_SUGGESTIONS)
    ]


def _emoji_suggestions(
    token: str, catalog: Sequence[EmojiEntry], *, filter_by_token: bool
) -> list[Suggestion]:
    entries = list(catalog)
    if filter_by_token and token:
        needle = token.lower()
        entries = [e for e in entries if needle in e.name.lower()]
    return [
        Suggestion(label=e.glyph, value=e.glyph, description=f":{e.name}:")
        for e in entries[:MAX_EMOJI_SUGGESTIONS]
    ]


def _command_suggestions(
    token: str, catalog: Sequence[CommandEntry], *, filter_by_token: bool
) -> list[Suggestion]:
    entries = list(catalog)
    if filter_by_token:
        head = token.split(maxsplit=1)[0] if token.strip() else token
        entries = [e for e in entries if e.command.startswith(head)]
    return [Suggestion(label=e.command, value=e.command, description=e.description) for e in entries]


def suggest(
    context: TriggerContext,
    roster: Sequence[RosterEntry],
    emoji_catalog: Sequence[EmojiEntry],
    command_catalog: Sequence[CommandEntry],
    *,
    filter_emoji: bool = False,
    filter_commands: bool = False,
) -> list[Suggestion]:
    """Return the ordered suggestion list for ``context``.

    By default the emoji list is the first 40 catalog entries and the command
    list is the whole catalog, whatever has been typed after the trigger.
    ``filter_emoji`` narrows emoji to names containing the partial token and
    ``filter_commands`` narrows commands to those starting with the typed
    command word.

    Args:
        context: Active trigger context from ``detect``
        roster: Current roster snapshot
        emoji_catalog: Emoji entries in picker order
        command_catalog: Slash commands in picker order
        filter_emoji: Filter emoji by the partial shortcode
        filter_commands: Filter commands by the typed prefix

    Returns:
        Suggestions in display order; empty when nothing should be shown
    """
    match context:
        case MentionTrigger(partial_token=token):
            return _mention_suggestions(token, roster)
        case EmojiTrigger(partial_token=token):
            return _emoji_suggestions(token, emoji_catalog, filter_by_token=filter_emoji)
        case CommandTrigger(partial_token=token):
            return _command_suggestions(token, command_catalog, filter_by_token=filter_commands)
        case _:
            return []

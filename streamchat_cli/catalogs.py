"""Static emoji and slash-command catalogs."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog file cannot be parsed."""


@dataclass(frozen=True)
class EmojiEntry:
    """An emoji shortcode name and the glyph it stands for."""

    name: str
    glyph: str


@dataclass(frozen=True)
class CommandEntry:
    """A slash command and its one-line description."""

    command: str
    description: str


EMOJI_CATALOG: tuple[EmojiEntry, ...] = tuple(
    EmojiEntry(name, glyph)
    for name, glyph in [
        ("grinning", "😀"),
        ("smiley", "😃"),
        ("smile", "😄"),
        ("grin", "😁"),
        ("laughing", "😆"),
        ("sweat_smile", "😅"),
        ("joy", "😂"),
        ("rofl", "🤣"),
        ("slightly_smiling_face", "🙂"),
        ("upside_down_face", "🙃"),
        ("wink", "😉"),
        ("blush", "😊"),
        ("innocent", "😇"),
        ("heart_eyes", "😍"),
        ("star_struck", "🤩"),
        ("kissing_heart", "😘"),
        ("yum", "😋"),
        ("stuck_out_tongue", "😛"),
        ("thinking", "🤔"),
        ("neutral_face", "😐"),
        ("expressionless", "😑"),
        ("smirk", "😏"),
        ("unamused", "😒"),
        ("roll_eyes", "🙄"),
        ("grimacing", "😬"),
        ("relieved", "😌"),
        ("sleepy", "😪"),
        ("sleeping", "😴"),
        ("sunglasses", "😎"),
        ("nerd_face", "🤓"),
        ("confused", "😕"),
        ("worried", "😟"),
        ("open_mouth", "😮"),
        ("astonished", "😲"),
        ("flushed", "😳"),
        ("pleading_face", "🥺"),
        ("cry", "😢"),
        ("sob", "😭"),
        ("scream", "😱"),
        ("rage", "😡"),
        ("skull", "💀"),
        ("clown_face", "🤡"),
        ("ghost", "👻"),
        ("robot", "🤖"),
        ("wave", "👋"),
        ("ok_hand", "👌"),
        ("thumbsup", "👍"),
        ("thumbsdown", "👎"),
        ("clap", "👏"),
        ("raised_hands", "🙌"),
        ("pray", "🙏"),
        ("muscle", "💪"),
        ("eyes", "👀"),
        ("heart", "❤️"),
        ("broken_heart", "💔"),
        ("fire", "🔥"),
        ("sparkles", "✨"),
        ("star", "⭐"),
        ("tada", "🎉"),
        ("trophy", "🏆"),
        ("rocket", "🚀"),
        ("100", "💯"),
        ("video_game", "🎮"),
        ("popcorn", "🍿"),
        ("coffee", "☕"),
    ]
)
"""Built-in emoji catalog, in picker order."""

SLASH_COMMANDS: tuple[CommandEntry, ...] = (
    CommandEntry("/mute", "Mute a user"),
    CommandEntry("/ban", "Ban a user"),
    CommandEntry("/title", "Set a title for the current stream"),
    CommandEntry("/description", "Set a description for the current stream"),
)
"""Built-in slash commands with descriptions."""


def _parse_emoji(raw: object, position: int) -> EmojiEntry:
    if not isinstance(raw, dict):
        msg = f"Emoji entry {position} must be an object, got {type(raw).__name__}"
        raise CatalogError(msg)
    name = raw.get("name")
    glyph = raw.get("char", raw.get("glyph"))
    if not isinstance(name, str) or not name or not isinstance(glyph, str) or not glyph:
        msg = f"Emoji entry {position} needs a non-empty 'name' and 'char'"
        raise CatalogError(msg)
    return EmojiEntry(name=name, glyph=glyph)


def load_emoji_catalog(path: Path) -> tuple[EmojiEntry, ...]:
    """Load an emoji catalog from a JSON file.

    The file holds an array of ``{"name": ..., "char": ...}`` objects
    (``"glyph"`` is accepted in place of ``"char"``). Order is preserved.

    Args:
        path: JSON file to read

    Returns:
        The catalog entries in file order

    Raises:
        CatalogError: If the file is unreadable or not a valid catalog
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        msg = f"Could not read emoji catalog {path}: {e}"
        raise CatalogError(msg) from e

    if not isinstance(data, list):
        msg = f"Emoji catalog {path} must contain a JSON array"
        raise CatalogError(msg)

    entries = tuple(_parse_emoji(raw, i) for i, raw in enumerate(data))
    logger.debug(f"Loaded {len(entries)} emoji from {path}")
    return entries


def find_emoji(catalog: Sequence[EmojiEntry], name: str) -> EmojiEntry | None:
    """Return the first catalog entry named ``name``, if any."""
    for entry in catalog:
        if entry.name == name:
            return entry
    return None

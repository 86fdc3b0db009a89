"""Configuration, constants, and settings for streamchat-cli."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import dotenv
from rich.console import Console

dotenv.load_dotenv()

# Color scheme
COLORS = {
    "primary": "#10b981",
    "dim": "#6b7280",
    "mention": "#f59e0b",
    "user": "#ffffff",
}

STREAMCHAT_ASCII = r"""
 ___ _                        ___ _         _
/ __| |_ _ _ ___ __ _ _ __   / __| |_  __ _| |_
\__ \  _| '_/ -_) _` | '  \ | (__| ' \/ _` |  _|
|___/\__|_| \___\__,_|_|_|_| \___|_||_\__,_|\__|
"""

DEFAULT_ROSTER_PATH = Path.home() / ".streamchat" / "roster.json"

_TRUTHY = {"1", "true", "yes", "on"}

# Console instance
console = Console(highlight=False)


def _env_flag(name: str, *, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name, "").strip()
    return Path(value).expanduser() if value else None


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment (and ``.env``).

    Attributes:
        username: Local user's name, used to highlight messages addressed to them
        roster_path: JSON file with the known users
        emoji_catalog_path: Optional JSON emoji catalog replacing the built-in one
        filter_emoji: Filter the emoji picker by the typed shortcode
        filter_commands: Filter the command picker by the typed command
        log_file: File to write logs to; None keeps logging to warnings only
        log_level: Log level name used when ``log_file`` is set
    """

    username: str | None = None
    roster_path: Path = DEFAULT_ROSTER_PATH
    emoji_catalog_path: Path | None = None
    filter_emoji: bool = False
    filter_commands: bool = False
    log_file: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> Settings:
        """Build settings from ``STREAMCHAT_*`` environment variables."""
        return cls(
            username=os.environ.get("STREAMCHAT_USERNAME") or None,
            roster_path=_env_path("STREAMCHAT_ROSTER") or DEFAULT_ROSTER_PATH,
            emoji_catalog_path=_env_path("STREAMCHAT_EMOJI_CATALOG"),
            filter_emoji=_env_flag("STREAMCHAT_FILTER_EMOJI"),
            filter_commands=_env_flag("STREAMCHAT_FILTER_COMMANDS"),
            log_file=_env_path("STREAMCHAT_LOG_FILE"),
            log_level=os.environ.get("STREAMCHAT_LOG_LEVEL", "INFO").upper(),
        )


settings = Settings.from_environment()

"""Main entry point for streamchat."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path

from rich.text import Text

from streamchat_cli._version import __version__
from streamchat_cli.catalogs import EMOJI_CATALOG, SLASH_COMMANDS, CatalogError, load_emoji_catalog
from streamchat_cli.config import Settings, console, settings
from streamchat_cli.roster import RosterError, load_roster
from streamchat_cli.session import ChatSession
from streamchat_cli.ui import show_help

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="StreamChat - terminal stream chat with live completion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"streamchat {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    subparsers.add_parser("help", help="Show help information")

    parser.add_argument("--roster", type=Path, help="Roster JSON file of known users")
    parser.add_argument("--username", help="Your username, used to highlight mentions")
    parser.add_argument(
        "--emoji-catalog", type=Path, help="Emoji catalog JSON replacing the built-in one"
    )
    parser.add_argument(
        "--filter-emoji",
        action="store_true",
        default=None,
        help="Filter the emoji picker by the typed shortcode",
    )
    parser.add_argument(
        "--filter-commands",
        action="store_true",
        default=None,
        help="Filter the command list by the typed command",
    )
    parser.add_argument("--log-file", type=Path, help="Write logs to this file")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """Apply command line overrides on top of environment settings."""
    overrides = {
        "roster_path": args.roster,
        "username": args.username,
        "emoji_catalog_path": args.emoji_catalog,
        "filter_emoji": args.filter_emoji,
        "filter_commands": args.filter_commands,
        "log_file": args.log_file,
    }
    return replace(base, **{k: v for k, v in overrides.items() if v is not None})


def configure_logging(config: Settings) -> None:
    """Send logs to the configured file; without one only warnings reach stderr."""
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            format=LOG_FORMAT,
            level=getattr(logging, config.log_level, logging.INFO),
            filename=config.log_file,
        )
    else:
        logging.basicConfig(format=LOG_FORMAT, level=logging.WARNING)


def build_session(config: Settings) -> ChatSession:
    """Load the roster and catalogs and create the input session.

    Raises:
        RosterError: If the roster file is malformed
        CatalogError: If the emoji catalog file is malformed
    """
    roster = load_roster(config.roster_path)
    emoji_catalog = (
        load_emoji_catalog(config.emoji_catalog_path)
        if config.emoji_catalog_path
        else EMOJI_CATALOG
    )
    logger.info(
        f"Starting session: {len(roster)} users, {len(emoji_catalog)} emoji, "
        f"filter_emoji={config.filter_emoji}, filter_commands={config.filter_commands}"
    )
    return ChatSession(
        roster,
        emoji_catalog,
        SLASH_COMMANDS,
        filter_emoji=config.filter_emoji,
        filter_commands=config.filter_commands,
    )


def cli_main() -> None:
    """Entry point for console script."""
    args = parse_args()

    if args.command == "help":
        show_help()
        return

    config = resolve_settings(args, settings)
    configure_logging(config)

    try:
        session = build_session(config)
    except (RosterError, CatalogError) as e:
        error_text = Text("❌ ", style="red")
        error_text.append(str(e))
        console.print(error_text)
        sys.exit(1)

    from streamchat_cli.app import run_textual_app

    try:
        asyncio.run(
            run_textual_app(
                session=session,
                username=config.username,
                roster_path=config.roster_path,
            )
        )
    except KeyboardInterrupt:
        console.print("\n\n[yellow]Interrupted[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    cli_main()

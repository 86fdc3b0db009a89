"""Console help output for the CLI."""

from .config import COLORS, STREAMCHAT_ASCII, console


def show_help() -> None:
    """Show help information."""
    console.print()
    console.print(STREAMCHAT_ASCII, style=f"bold {COLORS['primary']}")
    console.print()

    console.print("[bold]Usage:[/bold]", style=COLORS["primary"])
    console.print("  streamchat [OPTIONS]                 Start the chat")
    console.print("  streamchat help                      Show this help message")
    console.print("  streamchat --version                 Show streamchat version")
    console.print()

    console.print("[bold]Options:[/bold]", style=COLORS["primary"])
    console.print("  --roster PATH               Roster JSON file (array of {\"username\": ...})")
    console.print("  --username NAME             Your username; messages naming you are highlighted")
    console.print("  --emoji-catalog PATH        Emoji catalog JSON replacing the built-in one")
    console.print("  --filter-emoji              Narrow the emoji picker to the typed shortcode")
    console.print("  --filter-commands           Narrow the command list to the typed command")
    console.print("  --log-file PATH             Write logs to PATH")
    console.print()

    console.print("[bold]Environment:[/bold]", style=COLORS["primary"])
    console.print(
        "  STREAMCHAT_ROSTER, STREAMCHAT_USERNAME, STREAMCHAT_EMOJI_CATALOG,",
        style=COLORS["dim"],
    )
    console.print(
        "  STREAMCHAT_FILTER_EMOJI, STREAMCHAT_FILTER_COMMANDS,"
        " STREAMCHAT_LOG_FILE, STREAMCHAT_LOG_LEVEL",
        style=COLORS["dim"],
    )
    console.print()

    console.print("[bold]Interactive Features:[/bold]", style=COLORS["primary"])
    console.print("  Enter           Send message (or insert the highlighted emoji)", style=COLORS["dim"])
    console.print("  Ctrl+J          Insert newline", style=COLORS["dim"])
    console.print("  @name           Mention a user (Tab or click to complete)", style=COLORS["dim"])
    console.print("  :shortcode      Emoji picker (arrow keys, Enter to insert)", style=COLORS["dim"])
    console.print("  /title TEXT     Set the chat title", style=COLORS["dim"])
    console.print("  /description T  Set the chat description", style=COLORS["dim"])
    console.print("  Esc             Close the suggestion list", style=COLORS["dim"])
    console.print("  Ctrl+R          Reload the roster file", style=COLORS["dim"])
    console.print()

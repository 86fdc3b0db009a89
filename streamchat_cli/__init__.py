"""Stream chat client with live @mention, :emoji: and /command completion."""

from streamchat_cli._version import __version__

__all__ = ["__version__"]

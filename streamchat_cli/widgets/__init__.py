"""Textual widgets for streamchat-cli."""

from __future__ import annotations

from streamchat_cli.widgets.chat_input import ChatInput
from streamchat_cli.widgets.header import ChatHeader
from streamchat_cli.widgets.messages import (
    ErrorMessage,
    SystemMessage,
    UserMessage,
)
from streamchat_cli.widgets.status import StatusBar
from streamchat_cli.widgets.welcome import WelcomeBanner

__all__ = [
    "ChatHeader",
    "ChatInput",
    "ErrorMessage",
    "StatusBar",
    "SystemMessage",
    "UserMessage",
    "WelcomeBanner",
]

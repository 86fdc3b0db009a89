"""Tests for trigger detection."""

import pytest

from streamchat_cli.triggers import (
    NO_TRIGGER,
    CommandTrigger,
    EmojiTrigger,
    MentionTrigger,
    TriggerKind,
    detect,
)


class TestCommandTrigger:
    """Slash commands anchored at the start of the input."""

    def test_slash_only(self):
        """A lone slash opens the command context."""
        assert detect("/", 1) == CommandTrigger(partial_token="/")

    def test_partial_token_runs_to_cursor(self):
        """The partial token is the line up to the cursor."""
        assert detect("/title Evening", 4) == CommandTrigger(partial_token="/tit")

    @pytest.mark.parametrize("cursor", range(len("/ban @alice") + 1))
    def test_command_wins_over_mention(self, cursor):
        """A mention inside a command line never opens a mention list."""
        context = detect("/ban @alice", cursor)
        assert context.kind is TriggerKind.COMMAND

    def test_slash_mid_text_is_not_command(self):
        """Only a leading slash counts."""
        assert detect("see /help", 9) is NO_TRIGGER

    def test_token_start_is_zero(self):
        """Commands always span from the start of the input."""
        assert detect("/mute", 5).token_start == 0


class TestMentionTrigger:
    """@ mentions in the word under the cursor."""

    def test_at_alone(self):
        """A bare @ opens a mention context with an empty token."""
        assert detect("@", 1) == MentionTrigger(partial_token="", token_start=0)

    def test_mid_text(self):
        """Token and start offset are reported for a mention in a sentence."""
        assert detect("hi @al there", 6) == MentionTrigger(partial_token="al", token_start=3)

    def test_whitespace_closes_mention(self):
        """Typing a space after the name ends the mention."""
        assert detect("hi @al ", 7) is NO_TRIGGER

    def test_cursor_before_at(self):
        """An @ after the cursor does not count."""
        assert detect("hello @file", 5) is NO_TRIGGER

    def test_nearest_at_wins(self):
        """With two @ in one word the closest to the cursor is used."""
        assert detect("@a@bo", 5) == MentionTrigger(partial_token="bo", token_start=2)

    def test_escaped_at_is_literal(self):
        """A backslash-escaped @ does not open mention completion."""
        assert detect(r"mail \@bob", 10) is NO_TRIGGER

    def test_mention_wins_over_emoji(self):
        """Mention detection comes before emoji detection."""
        assert detect(":@al", 4).kind is TriggerKind.MENTION


class TestEmojiTrigger:
    """: shortcodes in the word under the cursor."""

    def test_colon_alone(self):
        """A bare colon opens the emoji picker."""
        assert detect("nice :", 6) == EmojiTrigger(partial_token="", token_start=5)

    def test_partial_shortcode(self):
        """Characters after the colon are the partial token."""
        assert detect("great :fi", 9) == EmojiTrigger(partial_token="fi", token_start=6)

    def test_closed_shortcode_is_not_a_trigger(self):
        """A completed :name: has no unmatched colon."""
        assert detect("great :fire:", 12) is NO_TRIGGER

    def test_second_shortcode_in_same_word(self):
        """After a closed shortcode, a new colon opens again."""
        assert detect(":fire::ro", 9) == EmojiTrigger(partial_token="ro", token_start=6)

    def test_whitespace_between_colon_and_cursor(self):
        """A colon in an earlier word does not count."""
        assert detect("note: see", 9) is NO_TRIGGER


class TestNoTrigger:
    """Inputs without any trigger."""

    @pytest.mark.parametrize(("text", "cursor"), [("", 0), ("hello", 5), ("a b c", 3)])
    def test_plain_text(self, text, cursor):
        """Plain text has no trigger."""
        assert detect(text, cursor) is NO_TRIGGER

    def test_out_of_range_cursor_is_clamped(self):
        """Cursor positions beyond the text are clamped, not rejected."""
        assert detect("@al", 100) == MentionTrigger(partial_token="al", token_start=0)
        assert detect("@al", -5) is NO_TRIGGER

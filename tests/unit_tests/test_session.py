"""Tests for the chat input session."""

import pytest

from streamchat_cli.catalogs import EMOJI_CATALOG, EmojiEntry
from streamchat_cli.composer import SubmitOutcome
from streamchat_cli.navigator import Direction
from streamchat_cli.roster import Roster
from streamchat_cli.session import ChatSession
from streamchat_cli.triggers import TriggerKind


@pytest.fixture
def roster():
    """A small roster in a fixed order."""
    return Roster.from_usernames(["alice", "albert", "bob", "alina", "carol"])


@pytest.fixture
def session(roster):
    """Session over the built-in catalogs."""
    return ChatSession(roster)


def _type(session, text):
    """Simulate typing ``text`` with the cursor at the end."""
    session.on_text_change(text, len(text))


class TestEmojiFlow:
    """Arrow-key driven emoji picker."""

    def test_colon_opens_navigable_list(self, session):
        """A colon opens the emoji picker with the first entry highlighted."""
        _type(session, "nice :")
        assert session.context.kind is TriggerKind.EMOJI
        assert len(session.suggestions) == 40
        assert session.selected_index == 0
        assert session.is_navigable

    def test_navigate_and_commit(self, session):
        """Arrow down then Enter inserts the second emoji."""
        _type(session, "nice :")
        assert session.on_directional_key(Direction.NEXT) is True
        assert session.on_commit_key() is True
        assert session.text == f"nice {EMOJI_CATALOG[1].glyph}"
        assert session.cursor == len(session.text)
        assert session.suggestions == ()

    def test_previous_wraps(self, session):
        """Arrow up from the first entry highlights the last."""
        _type(session, ":")
        session.on_directional_key(Direction.PREVIOUS)
        assert session.selected_index == 39

    def test_same_list_keeps_highlight(self, session):
        """Typing that leaves the list unchanged keeps the selection."""
        _type(session, ":")
        session.on_directional_key(Direction.NEXT)
        _type(session, ":f")
        assert session.selected_index == 1

    def test_changed_list_resets_highlight(self, roster):
        """A different list starts from the first entry again."""
        session = ChatSession(roster, filter_emoji=True)
        _type(session, ":")
        session.on_directional_key(Direction.NEXT)
        _type(session, ":s")
        assert session.selected_index == 0

    def test_closing_shortcode_closes_list(self, session):
        """Typing the closing colon ends the emoji context."""
        _type(session, ":fire")
        _type(session, ":fire:")
        assert session.suggestions == ()
        assert session.selected_index is None


class TestMentionFlow:
    """Mention lists are chosen, not navigated."""

    def test_mention_list(self, session):
        """Top three ranked users are offered."""
        _type(session, "hi @al")
        assert [s.label for s in session.suggestions] == ["@alice", "@bob", "@alina"]
        assert not session.is_navigable

    def test_keys_pass_through(self, session):
        """Arrows and Enter are left to the host."""
        _type(session, "hi @al")
        assert session.on_directional_key(Direction.NEXT) is False
        assert session.on_commit_key() is False
        assert session.text == "hi @al"

    def test_choose(self, session):
        """Choosing splices the mention and closes the list."""
        _type(session, "hi @al")
        assert session.on_choose_suggestion(2) == ("hi @alina ", 10)
        assert session.suggestions == ()

    def test_choose_mid_text(self, session):
        """Text after the cursor is preserved."""
        session.on_text_change("hi @al there", 6)
        assert session.on_choose_suggestion(0) == ("hi @alice there", 9)

    def test_roster_changes_between_events(self):
        """Suggestions use the roster as it is at each keystroke."""
        roster = Roster.from_usernames(["bob"])
        session = ChatSession(roster)
        _type(session, "@zo")
        assert [s.value for s in session.suggestions] == ["bob"]
        roster.add("zoe")
        _type(session, "@zoe")
        assert session.suggestions[0].value == "zoe"

    def test_roster_can_be_swapped(self, session):
        """Assigning a new roster takes effect on the next change."""
        session.roster = Roster.from_usernames(["zed"])
        _type(session, "@z")
        assert [s.value for s in session.suggestions] == ["zed"]


class TestCommandFlow:
    """Slash command list."""

    def test_choose_command(self, session):
        """Choosing a command replaces the buffer."""
        _type(session, "/ti")
        assert [s.value for s in session.suggestions] == ["/mute", "/ban", "/title", "/description"]
        assert session.on_choose_suggestion(2) == ("/title ", 7)

    def test_mention_inside_command(self, session):
        """A command line keeps the command list open."""
        _type(session, "/ban @al")
        assert session.context.kind is TriggerKind.COMMAND


class TestChooseErrors:
    """Invalid choices."""

    def test_closed(self, session):
        """Choosing with nothing open raises."""
        with pytest.raises(IndexError, match="No suggestion at index 0"):
            session.on_choose_suggestion(0)

    def test_out_of_range(self, session):
        """Indices past the list raise."""
        _type(session, "/")
        with pytest.raises(IndexError):
            session.on_choose_suggestion(4)


class TestSubmit:
    """Submitting the buffer."""

    def test_message(self, session):
        """Messages are finalized and the buffer cleared."""
        _type(session, "@bob great game :fire:")
        assert session.on_submit() is SubmitOutcome.MESSAGE
        assert session.messages == ("bob great game 🔥",)
        assert session.text == ""
        assert session.cursor == 0

    def test_directive(self, session):
        """/title updates the metadata without adding a message."""
        _type(session, "/title Evening Stream")
        assert session.on_submit() is SubmitOutcome.DIRECTIVE
        assert session.metadata.title == "Evening Stream"
        assert session.messages == ()
        assert session.suggestions == ()

    def test_escaped_mention(self, session):
        """An escaped mention opens no list and is posted as typed."""
        _type(session, r"mail \@bob")
        assert session.suggestions == ()
        session.on_submit()
        assert session.messages == (r"mail \@bob",)

    def test_blank_keeps_buffer(self, session):
        """Whitespace-only input is ignored and kept."""
        _type(session, "   ")
        assert session.on_submit() is SubmitOutcome.IGNORED
        assert session.text == "   "

    def test_custom_catalog(self, roster):
        """Shortcodes resolve against the session's catalog."""
        session = ChatSession(roster, [EmojiEntry("party", "🥳")])
        _type(session, "yay :party:")
        session.on_submit()
        assert session.messages == ("yay 🥳",)


class TestDismiss:
    """Closing the list without inserting."""

    def test_dismiss(self, session):
        """dismiss reports whether a list was open."""
        _type(session, ":")
        assert session.dismiss() is True
        assert session.dismiss() is False

    def test_stays_closed_until_next_change(self, session):
        """Re-sending the same text does not reopen the list."""
        _type(session, ":")
        session.dismiss()
        _type(session, ":")
        assert session.suggestions == ()
        _type(session, ":s")
        assert len(session.suggestions) == 40

"""Tests for the roster and roster loading."""

import json

import pytest

from streamchat_cli.roster import Roster, RosterEntry, RosterError, load_roster


class TestRoster:
    """Tests for Roster."""

    def test_from_usernames_keeps_order(self):
        """Entries keep the order they were given in."""
        roster = Roster.from_usernames(["carol", "alice", "bob"])
        assert roster.usernames() == ["carol", "alice", "bob"]
        assert len(roster) == 3

    def test_iterates_entries(self):
        """Iteration yields RosterEntry values."""
        assert list(Roster.from_usernames(["alice"])) == [RosterEntry("alice")]

    def test_add_appends(self):
        """New users go to the end."""
        roster = Roster.from_usernames(["alice"])
        roster.add("zed")
        assert roster.usernames() == ["alice", "zed"]

    def test_replace(self):
        """replace swaps in the new entries."""
        roster = Roster.from_usernames(["alice"])
        roster.replace([RosterEntry("bob")])
        assert roster.usernames() == ["bob"]


class TestLoadRoster:
    """Tests for load_roster."""

    def test_missing_file_is_empty(self, tmp_path):
        """A missing roster file gives an empty roster."""
        assert len(load_roster(tmp_path / "nope.json")) == 0

    def test_objects(self, tmp_path):
        """Objects with a username key are loaded; extra keys are ignored."""
        path = tmp_path / "roster.json"
        path.write_text(json.dumps([{"username": "alice", "id": 1}, {"username": "bob"}]))
        assert load_roster(path).usernames() == ["alice", "bob"]

    def test_plain_strings(self, tmp_path):
        """Bare strings are accepted as usernames."""
        path = tmp_path / "roster.json"
        path.write_text(json.dumps(["alice", "bob"]))
        assert load_roster(path).usernames() == ["alice", "bob"]

    def test_invalid_json(self, tmp_path):
        """Unparseable files raise RosterError."""
        path = tmp_path / "roster.json"
        path.write_text("{not json")
        with pytest.raises(RosterError, match="Could not read roster"):
            load_roster(path)

    def test_not_an_array(self, tmp_path):
        """The top level must be an array."""
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"username": "alice"}))
        with pytest.raises(RosterError, match="must contain a JSON array"):
            load_roster(path)

    @pytest.mark.parametrize("entry", [{"name": "alice"}, {"username": ""}, 42])
    def test_bad_entry(self, tmp_path, entry):
        """Entries without a usable username are rejected."""
        path = tmp_path / "roster.json"
        path.write_text(json.dumps([entry]))
        with pytest.raises(RosterError, match="Roster entry 0"):
            load_roster(path)

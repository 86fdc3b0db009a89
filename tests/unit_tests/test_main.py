"""Tests for command line parsing and settings resolution."""

import json
import logging
from pathlib import Path

import pytest

from streamchat_cli.catalogs import EMOJI_CATALOG, CatalogError
from streamchat_cli.config import DEFAULT_ROSTER_PATH, Settings
from streamchat_cli.main import build_session, parse_args, resolve_settings
from streamchat_cli.roster import RosterError


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        """No arguments leaves every override unset."""
        args = parse_args([])
        assert args.command is None
        assert args.roster is None
        assert args.username is None
        assert args.filter_emoji is None
        assert args.filter_commands is None

    def test_options(self):
        """Options are parsed into paths and flags."""
        args = parse_args(
            ["--roster", "users.json", "--username", "alice", "--filter-emoji", "--log-file", "x.log"]
        )
        assert args.roster == Path("users.json")
        assert args.username == "alice"
        assert args.filter_emoji is True
        assert args.filter_commands is None
        assert args.log_file == Path("x.log")

    def test_help_command(self):
        """help is a subcommand."""
        assert parse_args(["help"]).command == "help"


class TestResolveSettings:
    """Tests for resolve_settings."""

    def test_unset_options_keep_base(self):
        """Without overrides the base settings are returned unchanged."""
        base = Settings(username="bob", filter_commands=True)
        assert resolve_settings(parse_args([]), base) == base

    def test_options_override_base(self):
        """Command line values win over the environment."""
        base = Settings(username="bob")
        config = resolve_settings(parse_args(["--username", "alice", "--filter-commands"]), base)
        assert config.username == "alice"
        assert config.filter_commands is True
        assert config.roster_path == DEFAULT_ROSTER_PATH


class TestSettingsFromEnvironment:
    """Tests for Settings.from_environment."""

    def test_reads_variables(self, monkeypatch, tmp_path):
        """STREAMCHAT_* variables populate the settings."""
        monkeypatch.setenv("STREAMCHAT_USERNAME", "alice")
        monkeypatch.setenv("STREAMCHAT_ROSTER", str(tmp_path / "r.json"))
        monkeypatch.setenv("STREAMCHAT_FILTER_EMOJI", "yes")
        monkeypatch.setenv("STREAMCHAT_FILTER_COMMANDS", "0")
        monkeypatch.setenv("STREAMCHAT_LOG_LEVEL", "debug")
        config = Settings.from_environment()
        assert config.username == "alice"
        assert config.roster_path == tmp_path / "r.json"
        assert config.filter_emoji is True
        assert config.filter_commands is False
        assert config.log_level == "DEBUG"

    def test_defaults(self, monkeypatch):
        """Unset variables fall back to defaults."""
        for name in (
            "STREAMCHAT_USERNAME",
            "STREAMCHAT_ROSTER",
            "STREAMCHAT_EMOJI_CATALOG",
            "STREAMCHAT_FILTER_EMOJI",
            "STREAMCHAT_FILTER_COMMANDS",
            "STREAMCHAT_LOG_FILE",
            "STREAMCHAT_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        assert Settings.from_environment() == Settings()


class TestBuildSession:
    """Tests for build_session."""

    def test_missing_roster(self, tmp_path):
        """A missing roster file gives an empty roster and built-in catalogs."""
        session = build_session(Settings(roster_path=tmp_path / "none.json"))
        assert len(session.roster) == 0
        session.on_text_change(":", 1)
        assert session.suggestions[0].value == EMOJI_CATALOG[0].glyph

    def test_loads_files(self, tmp_path, caplog):
        """Roster and emoji catalog files are loaded."""
        roster_path = tmp_path / "roster.json"
        roster_path.write_text(json.dumps(["alice"]))
        catalog_path = tmp_path / "emoji.json"
        catalog_path.write_text(json.dumps([{"name": "fire", "char": "🔥"}]), encoding="utf-8")

        with caplog.at_level(logging.INFO, logger="streamchat_cli.main"):
            session = build_session(
                Settings(roster_path=roster_path, emoji_catalog_path=catalog_path)
            )

        assert session.roster.usernames() == ["alice"]
        session.on_text_change(":", 1)
        assert [s.value for s in session.suggestions] == ["🔥"]
        assert "1 users, 1 emoji" in caplog.text

    def test_bad_roster(self, tmp_path):
        """A malformed roster propagates RosterError."""
        path = tmp_path / "roster.json"
        path.write_text("[1]")
        with pytest.raises(RosterError):
            build_session(Settings(roster_path=path))

    def test_bad_catalog(self, tmp_path):
        """A malformed catalog propagates CatalogError."""
        path = tmp_path / "emoji.json"
        path.write_text("nope")
        with pytest.raises(CatalogError):
            build_session(Settings(roster_path=tmp_path / "r.json", emoji_catalog_path=path))

"""Tests for CLI module."""

import json
import logging

import pytest
from click.testing import CliRunner

from music_streaming.cli import cli, load_script
from music_streaming.exceptions import ScriptError


SCENARIO = [
    {"op": "create_user", "name": "Alice", "mobile": "111"},
    {"op": "create_album", "title": "Al", "artist_name": "A"},
    {"op": "create_song", "title": "S", "album_name": "Al", "length": 200},
    {"op": "like_song", "mobile": "111", "song_title": "S"},
    {"op": "like_song", "mobile": "111", "song_title": "S"},
    {"op": "create_playlist_on_name", "mobile": "111", "title": "Mix", "song_titles": ["S", "Nope"]},
    {"op": "most_popular_artist"},
]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The replay command installs a root handler; undo it after each test."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def write_script(path, steps):
    path.write_text(json.dumps(steps))
    return path


class TestLoadScript:
    """Test reading operation scripts."""

    def test_list_script(self, tmp_path):
        """Test a plain list of steps."""
        path = write_script(tmp_path / "script.json", SCENARIO)

        assert load_script(path) == SCENARIO

    def test_object_script(self, tmp_path):
        """Test a script wrapped in a steps object."""
        path = write_script(tmp_path / "script.json", {"steps": SCENARIO[:1]})

        assert load_script(path) == SCENARIO[:1]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "script.json"
        path.write_text("[")

        with pytest.raises(ScriptError):
            load_script(path)

    def test_steps_must_be_objects(self, tmp_path):
        """Test that non-object steps are rejected."""
        path = write_script(tmp_path / "script.json", ["create_user"])

        with pytest.raises(ScriptError):
            load_script(path)

    def test_non_utf8_script(self, tmp_path):
        path = tmp_path / "script.json"
        path.write_bytes(b'[{"op": "create_user", "name": "\xff"}]')

        with pytest.raises(ScriptError):
            load_script(path)


class TestReplayCommand:
    """Test the replay command."""

    def test_replay_success(self, runner, tmp_path):
        """Test replaying a scenario that succeeds."""
        path = write_script(tmp_path / "script.json", SCENARIO)

        result = runner.invoke(cli, ["replay", str(path)])

        assert result.exit_code == 0, result.output
        assert "user Alice (111)" in result.output
        assert "song S (200) [1 likes]" in result.output
        assert "Most popular artist: A" in result.output
        assert "7 steps completed" in result.output

    def test_replay_failure_exit_code(self, runner, tmp_path):
        """Test that a failing step sets the exit code."""
        steps = SCENARIO + [{"op": "find_playlist", "mobile": "111", "playlist_title": "Nope"}]
        path = write_script(tmp_path / "script.json", steps)

        result = runner.invoke(cli, ["replay", str(path)])

        assert result.exit_code == 1
        assert "Playlist does not exist: Nope" in result.output
        assert "1 of 8 steps failed" in result.output

    def test_replay_fail_fast(self, runner, tmp_path):
        """Test that --fail-fast stops at the first failure."""
        steps = [
            {"op": "like_song", "mobile": "999", "song_title": "S"},
            {"op": "create_user", "name": "Alice", "mobile": "111"},
        ]
        path = write_script(tmp_path / "script.json", steps)

        result = runner.invoke(cli, ["replay", "--fail-fast", str(path)])

        assert result.exit_code == 1
        assert "User does not exist: 999" in result.output
        assert "user Alice" not in result.output

    def test_replay_without_tables(self, runner, tmp_path):
        """Test turning off summary tables through the config."""
        path = write_script(tmp_path / "script.json", SCENARIO)
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"display": {"show_tables": False}}))

        result = runner.invoke(cli, ["replay", "--config", str(config_path), str(path)])

        assert result.exit_code == 0, result.output
        assert "Most popular artist" not in result.output

    def test_replay_bad_script(self, runner, tmp_path):
        """Test that an unreadable script is reported."""
        path = tmp_path / "script.json"
        path.write_text("{}")

        result = runner.invoke(cli, ["replay", str(path)])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_replay_badly_typed_step(self, runner, tmp_path):
        """Test that a step with a wrongly typed value fails like any other step."""
        steps = [
            {"op": "create_user", "name": "Alice", "mobile": "111"},
            {"op": "create_playlist_on_name", "mobile": "111", "title": "Mix", "song_titles": None},
        ]
        path = write_script(tmp_path / "script.json", steps)

        result = runner.invoke(cli, ["replay", str(path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "song_titles" in result.output
        assert "1 of 2 steps failed" in result.output

    def test_replay_badly_typed_config(self, runner, tmp_path):
        """Test that a config value of the wrong type is reported, not raised."""
        path = write_script(tmp_path / "script.json", SCENARIO)
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"display": {"top_n": "x"}}))

        result = runner.invoke(cli, ["replay", "--config", str(config_path), str(path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output


class TestInitConfigCommand:
    """Test the init-config command."""

    def test_writes_default_config(self, runner, tmp_path):
        """Test writing a default configuration."""
        path = tmp_path / "config.json"

        result = runner.invoke(cli, ["init-config", str(path)])

        assert result.exit_code == 0
        assert json.loads(path.read_text())["logging"]["level"] == "WARNING"

    def test_refuses_to_overwrite(self, runner, tmp_path):
        """Test that an existing file is kept without --force."""
        path = tmp_path / "config.json"
        path.write_text("{}")

        result = runner.invoke(cli, ["init-config", str(path)])

        assert result.exit_code == 1
        assert path.read_text() == "{}"

        result = runner.invoke(cli, ["init-config", "--force", str(path)])
        assert result.exit_code == 0


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output

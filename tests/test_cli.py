"""Tests for the command line interface."""

import asyncio

import pytest
from click.testing import CliRunner

from vita_harmony.cli import main
from vita_harmony.commands.play import _handle_key
from vita_harmony.models.session import PlayerState
from vita_harmony.services.player import WorkoutPlayer
from vita_harmony.services.runner import SessionRunner


@pytest.fixture
def cli(data_dir, monkeypatch):
    monkeypatch.setenv("VITA_TICK_INTERVAL", "0")
    monkeypatch.setenv("VITA_WORKOUT_RESET_DELAY", "0")
    monkeypatch.setenv("VITA_MEDITATION_RESET_DELAY", "0")
    runner = CliRunner()

    def invoke(*args, **kwargs):
        return runner.invoke(main, list(args), catch_exceptions=False, **kwargs)

    return invoke


@pytest.fixture
def initialized(cli):
    result = cli("init")
    assert result.exit_code == 0
    return cli


def test_init(cli, data_dir):
    result = cli("init")

    assert result.exit_code == 0
    assert "Database initialized" in result.output
    assert (data_dir / "vita_harmony.db").exists()


def test_requires_init(cli):
    result = cli("profile", "show")

    assert result.exit_code == 1
    assert "not initialized" in result.output


class TestProfileCommands:
    """Tests for the profile group."""

    def test_show_guest(self, initialized):
        result = initialized("profile", "show")

        assert result.exit_code == 0
        assert "Guest" in result.output

    def test_update(self, initialized):
        result = initialized("profile", "update", "--name", "Ana", "--goal", "Endurance")
        assert result.exit_code == 0

        result = initialized("profile", "show")
        assert "Ana" in result.output
        assert "Goal: Endurance" in result.output

    def test_update_requires_option(self, initialized):
        result = initialized("profile", "update")

        assert result.exit_code == 1
        assert "Nothing to update" in result.output

    def test_prefs(self, initialized):
        result = initialized("profile", "prefs", "--meditation-minutes", "20")

        assert result.exit_code == 0
        assert "Meditation duration: 20 min" in result.output

    def test_delete(self, initialized):
        initialized("profile", "update", "--name", "Ana")
        result = initialized("profile", "delete", "--yes")
        assert "Account deleted" in result.output

        assert "Guest" in initialized("profile", "show").output


class TestSettingsCommands:
    """Tests for the settings group."""

    def test_toggle(self, initialized):
        result = initialized("settings", "toggle", "sound")
        assert "Sound turned off" in result.output

        result = initialized("settings", "show")
        assert "Sound:         off" in result.output

    def test_reminder(self, initialized):
        assert initialized("settings", "reminder", "06:45").exit_code == 0
        assert "06:45" in initialized("settings", "show").output

    def test_invalid_reminder(self, initialized):
        result = initialized("settings", "reminder", "25:00")

        assert result.exit_code == 1
        assert "Invalid time" in result.output


class TestCatalogCommands:
    """Tests for workouts and meditations."""

    def test_list_workouts(self, initialized):
        result = initialized("workouts", "list")

        assert result.exit_code == 0
        assert "Full Body Workout" in result.output

    def test_show_unknown_workout(self, initialized):
        result = initialized("workouts", "show", "Moon Walk")

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_show_meditation(self, initialized):
        result = initialized("meditations", "show", "box breathing")

        assert result.exit_code == 0
        assert "Box Breathing" in result.output


class TestPlay:
    """Tests for live playback."""

    def test_play_workout_records_history(self, initialized):
        result = initialized("play", "workout", "Full Body Workout", "--no-input")

        assert result.exit_code == 0
        assert "Great job!" in result.output

        result = initialized("history")
        assert "Workouts:   1 total" in result.output
        assert "Full Body Workout" in result.output

        assert "Workouts: 1" in initialized("profile", "show").output

    def test_play_meditation(self, initialized):
        result = initialized("play", "meditation", "Box Breathing", "--no-input")

        assert result.exit_code == 0
        assert "Welcome to Box Breathing" in result.output

        assert "Meditation: 10 min" in initialized("profile", "show").output

    def test_play_unknown(self, initialized):
        result = initialized("play", "meditation", "Nope", "--no-input")
        assert result.exit_code == 1


def test_gate_without_url(cli):
    result = cli("gate")

    assert result.exit_code == 0
    assert "Display mode: native" in result.output


def test_gate_with_malformed_url(cli):
    result = cli("gate", "--url", "http://[::1")

    assert result.exit_code == 0
    assert "Display mode: native" in result.output


def test_quit_key_cancels_session(fast_settings, short_workout):
    fast_settings = fast_settings.model_copy(update={"tick_interval": 0.01})

    async def scenario():
        runner = SessionRunner(WorkoutPlayer(), settings=fast_settings)
        runner.start(short_workout)
        await asyncio.sleep(0.03)
        _handle_key(runner, "q")
        await runner.wait()
        return runner

    runner = asyncio.run(scenario())

    assert runner.player.state == PlayerState.IDLE
    assert not runner.running
    assert runner.player.history == []

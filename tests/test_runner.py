"""Tests for the asyncio session runner."""

import asyncio

from vita_harmony.db import HistoryRepository, ProfileRepository
from vita_harmony.models.session import EventKind, PlayerState
from vita_harmony.services.player import MeditationPlayer, WorkoutPlayer
from vita_harmony.services.profile import ProfileService
from vita_harmony.services.runner import SessionRunner


def make_runner(player, settings, db_path):
    async def build():
        repo = ProfileRepository(db_path=db_path)
        service = await ProfileService.load(repo)
        return SessionRunner(
            player,
            settings=settings,
            history=HistoryRepository(repo.store),
            profile=service,
        )

    return build


class TestSessionRunner:
    """Tests for SessionRunner."""

    def test_workout_runs_to_completion(self, fast_settings, temp_db_path, short_workout):
        async def scenario():
            runner = await make_runner(WorkoutPlayer(), fast_settings, temp_db_path)()
            events = []
            runner.player.subscribe(lambda e: events.append(e.kind))
            runner.start(short_workout)
            await runner.wait()
            history = await runner.history.get_workouts()
            return runner, events, history

        runner, events, history = asyncio.run(scenario())

        assert runner.player.state == PlayerState.IDLE
        assert EventKind.COMPLETED in events
        assert events[-1] == EventKind.RESET
        assert [w.name for w in history] == ["Test Circuit"]
        assert history[0].performance == 0.75
        assert runner.profile.profile.total_workouts == 1
        assert runner.profile.profile.streak == 1

    def test_meditation_records_minutes(self, fast_settings, temp_db_path, short_meditation):
        async def scenario():
            runner = await make_runner(MeditationPlayer(), fast_settings, temp_db_path)()
            runner.start(short_meditation)
            await runner.wait()
            stored = await runner.profile.repo.get_profile()
            return stored, await runner.history.get_meditations()

        stored, sessions = asyncio.run(scenario())

        assert stored.total_meditation_minutes == 2
        assert stored.streak == 1
        assert len(sessions) == 1
        assert sessions[0].focus_score == 0.0

    def test_cancel_records_nothing(self, fast_settings, temp_db_path, short_workout):
        fast_settings = fast_settings.model_copy(update={"tick_interval": 0.01})

        async def scenario():
            runner = await make_runner(WorkoutPlayer(), fast_settings, temp_db_path)()
            runner.start(short_workout)
            await asyncio.sleep(0.05)
            await runner.cancel()
            return runner, await runner.history.get_workouts()

        runner, history = asyncio.run(scenario())

        assert runner.player.state == PlayerState.IDLE
        assert not runner.running
        assert history == []
        assert runner.profile.profile.total_workouts == 0

    def test_stop_is_collected_by_wait(self, fast_settings, temp_db_path, short_workout):
        fast_settings = fast_settings.model_copy(update={"tick_interval": 0.01})

        async def scenario():
            runner = await make_runner(WorkoutPlayer(), fast_settings, temp_db_path)()
            events = []
            runner.player.subscribe(lambda e: events.append(e.kind))
            runner.start(short_workout)
            await asyncio.sleep(0.05)
            runner.stop()
            await runner.wait()
            return runner, events, await runner.history.get_workouts()

        runner, events, history = asyncio.run(scenario())

        assert not runner.running
        assert runner._task.done()
        assert events[-1] == EventKind.CANCELLED
        assert history == []

    def test_pause_stops_the_clock(self, fast_settings, temp_db_path, short_workout):
        fast_settings = fast_settings.model_copy(update={"tick_interval": 0.01})

        async def scenario():
            runner = await make_runner(WorkoutPlayer(), fast_settings, temp_db_path)()
            runner.start(short_workout)
            await asyncio.sleep(0.05)
            runner.pause()
            frozen = runner.player.elapsed
            await asyncio.sleep(0.05)
            after = runner.player.elapsed
            await runner.cancel()
            return frozen, after

        frozen, after = asyncio.run(scenario())
        assert frozen == after

    def test_runs_without_persistence(self, fast_settings, short_workout):
        async def scenario():
            runner = SessionRunner(WorkoutPlayer(), settings=fast_settings)
            runner.start(short_workout)
            await runner.wait()
            return runner

        runner = asyncio.run(scenario())
        assert len(runner.player.history) == 1

"""Asyncio clock for session players."""

import asyncio
import contextlib
import logging

from ..config import Settings, get_settings
from ..db.repositories import HistoryRepository
from ..models.session import PlayerState
from .player import MeditationPlayer, WorkoutPlayer
from .profile import ProfileService

logger = logging.getLogger(__name__)


class SessionRunner:
    """Drives a player with one tick per ``tick_interval`` seconds.

    On completion the finished item is appended to the stored history, the
    profile counters and streak are updated, and after the reset delay the
    player returns to idle.
    """

    def __init__(
        self,
        player: WorkoutPlayer | MeditationPlayer,
        settings: Settings | None = None,
        history: HistoryRepository | None = None,
        profile: ProfileService | None = None,
    ):
        self.player = player
        self.settings = settings or get_settings()
        self.history = history
        self.profile = profile
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def reset_delay(self) -> float:
        if isinstance(self.player, WorkoutPlayer):
            return self.settings.workout_reset_delay
        return self.settings.meditation_reset_delay

    def start(self, item) -> None:
        """Start the player on ``item`` and schedule the tick task."""
        self.player.start(item)
        self._task = asyncio.create_task(self._run())

    async def wait(self) -> None:
        """Wait until the session has finished or been cancelled."""
        if self._task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await self._task

    def stop(self) -> None:
        """Cancel the session and the clock task without waiting.

        The cancelled task is collected by ``wait``.
        """
        if self.player.is_active:
            self.player.cancel()
        if self._task is not None:
            self._task.cancel()

    async def cancel(self) -> None:
        """Cancel the session and wait for the clock to stop."""
        self.stop()
        await self.wait()

    def pause(self) -> None:
        self.player.pause()

    def resume(self) -> None:
        self.player.resume()

    async def _run(self) -> None:
        while self.player.is_active:
            await asyncio.sleep(self.settings.tick_interval)
            self.player.tick()

        if self.player.state != PlayerState.COMPLETED:
            return

        await self._record(self.player.history[-1])
        await asyncio.sleep(self.reset_delay)
        if self.player.state == PlayerState.COMPLETED:
            self.player.reset()

    async def _record(self, item) -> None:
        logger.debug("Recording completed %s", self.player.kind)
        if isinstance(self.player, WorkoutPlayer):
            if self.history is not None:
                workouts = await self.history.get_workouts()
                workouts.append(item)
                await self.history.save_workouts(workouts)
            if self.profile is not None:
                await self.profile.record_workout()
        else:
            if self.history is not None:
                sessions = await self.history.get_meditations()
                sessions.append(item)
                await self.history.save_meditations(sessions)
            if self.profile is not None:
                await self.profile.record_meditation(item.duration // 60)

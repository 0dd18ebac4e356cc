"""Live session playback in the terminal."""

import asyncio
import logging
import sys

import click

from ..catalog import (
    adapt_session,
    adapt_workout,
    all_meditation_sessions,
    all_workouts,
    find_session,
    find_workout,
)
from ..config import get_settings
from ..errors import PlayerStateError
from ..models.session import EventKind, PlayerEvent, PlayerState
from ..services.player import MeditationPlayer, WorkoutPlayer
from ..services.runner import SessionRunner
from .base import (
    async_command,
    echo_error,
    echo_header,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    history_repository,
    load_profile_service,
)

logger = logging.getLogger(__name__)

WORKOUT_KEYS = "[p] pause/resume  [s] skip  [d] done  [g] felt good  [b] struggling  [q] quit"
MEDITATION_KEYS = "[p] pause/resume  [y] with it  [n] drifted  [q] quit"


def _clock(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def _printer(runner: SessionRunner):
    def on_event(event: PlayerEvent) -> None:
        player = runner.player
        stamp = _clock(player.elapsed)
        if event.kind == EventKind.STARTED:
            echo_header(f"Starting: {event.message}")
        elif event.kind == EventKind.STEP_CHANGED:
            data = event.data or {}
            click.echo(
                f"{stamp}  "
                + click.style(f"Next up ({data['index'] + 1}/{data['step_count']}): ", bold=True)
                + event.message
            )
        elif event.kind == EventKind.INSTRUCTION:
            data = event.data or {}
            suffix = ""
            if data.get("interactive"):
                prompt = data.get("interaction_type") or "respond"
                suffix = click.style(f"  ({prompt}: y/n)", dim=True)
            click.echo(f"{stamp}  {event.message}{suffix}")
        elif event.kind == EventKind.COACH_MESSAGE:
            click.echo(f"{stamp}  " + click.style(event.message, fg="cyan"))
        elif event.kind == EventKind.PAUSED:
            echo_info(f"Paused at {stamp}")
        elif event.kind == EventKind.RESUMED:
            echo_info("Resumed")
        elif event.kind == EventKind.COMPLETED:
            click.echo()
            echo_success(event.message)
            summary = (event.data or {}).get("summary")
            if summary:
                click.echo(summary)
        elif event.kind == EventKind.CANCELLED:
            echo_warning("Session cancelled, nothing recorded")

    return on_event


def _handle_key(runner: SessionRunner, key: str) -> None:
    player = runner.player
    try:
        if key == "p":
            if player.state == PlayerState.PAUSED:
                runner.resume()
            else:
                runner.pause()
        elif key == "q":
            runner.stop()
        elif isinstance(player, WorkoutPlayer) and key in ("s", "d", "g", "b"):
            {
                "s": player.skip,
                "d": player.complete_step,
                "g": player.record_good_performance,
                "b": player.record_poor_performance,
            }[key]()
        elif isinstance(player, MeditationPlayer) and key in ("y", "n"):
            player.record_interaction(key == "y")
    except PlayerStateError as e:
        echo_warning(str(e))


def _attach_keyboard(runner: SessionRunner) -> bool:
    """Read single-letter commands from stdin while the session runs."""
    loop = asyncio.get_running_loop()

    def on_input() -> None:
        line = sys.stdin.readline()
        if line:
            _handle_key(runner, line.strip().lower()[:1])

    try:
        loop.add_reader(sys.stdin.fileno(), on_input)
    except (NotImplementedError, ValueError, OSError) as e:
        logger.debug("Keyboard controls unavailable: %s", e)
        return False
    return True


def _detach_keyboard() -> None:
    try:
        asyncio.get_running_loop().remove_reader(sys.stdin.fileno())
    except (NotImplementedError, ValueError, OSError):
        pass


async def _play(runner: SessionRunner, item, keys: str, interactive: bool) -> None:
    runner.player.subscribe(_printer(runner))
    runner.start(item)

    if interactive and _attach_keyboard(runner):
        click.echo(click.style(keys, dim=True))
    try:
        await runner.wait()
    finally:
        if interactive:
            _detach_keyboard()


@click.group()
@click.pass_context
def play(ctx):
    """Play a workout or meditation session live."""
    ensure_initialized(ctx)


@play.command()
@click.argument("name")
@click.option("--speed", default=1.0, type=click.FloatRange(min=0, min_open=True), help="Clock speed multiplier")
@click.option("--adapt/--no-adapt", default=True, help="Scale from your last run of this workout")
@click.option("--no-input", is_flag=True, help="Disable keyboard controls")
@click.pass_context
@async_command
async def workout(ctx, name: str, speed: float, adapt: bool, no_input: bool):
    """Play a workout by name."""
    service = await load_profile_service()
    template = find_workout(all_workouts(service.profile.fitness_level), name)
    if template is None:
        echo_error(f"Workout '{name}' not found")
        ctx.exit(1)

    history = history_repository()
    if adapt:
        past = [w for w in await history.get_workouts() if w.name == template.name]
        if past and past[-1].performance is not None:
            template = adapt_workout(template, past[-1].performance)
            echo_info(f"Adapted from your last performance ({past[-1].performance:.0%})")

    settings = get_settings()
    settings = settings.model_copy(update={"tick_interval": settings.tick_interval / speed})
    runner = SessionRunner(
        WorkoutPlayer(weight_kg=service.profile.weight),
        settings=settings,
        history=history,
        profile=service,
    )
    await _play(runner, template, WORKOUT_KEYS, not no_input)


@play.command()
@click.argument("title")
@click.option("--speed", default=1.0, type=click.FloatRange(min=0, min_open=True), help="Clock speed multiplier")
@click.option("--adapt/--no-adapt", default=False, help="Scale from your last focus score")
@click.option("--no-input", is_flag=True, help="Disable keyboard controls")
@click.pass_context
@async_command
async def meditation(ctx, title: str, speed: float, adapt: bool, no_input: bool):
    """Play a meditation session by title."""
    service = await load_profile_service()
    template = find_session(all_meditation_sessions(), title)
    if template is None:
        echo_error(f"Meditation '{title}' not found")
        ctx.exit(1)

    history = history_repository()
    if adapt:
        past = [s for s in await history.get_meditations() if s.title == template.title]
        if past and past[-1].focus_score is not None:
            template = adapt_session(template, past[-1].focus_score)
            echo_info(f"Adapted to {template.formatted_duration}, {template.difficulty.value}")

    settings = get_settings()
    settings = settings.model_copy(update={"tick_interval": settings.tick_interval / speed})
    runner = SessionRunner(MeditationPlayer(), settings=settings, history=history, profile=service)
    await _play(runner, template, MEDITATION_KEYS, not no_input)

"""Workout and meditation catalog commands."""

import click

from ..catalog import (
    all_meditation_sessions,
    all_workouts,
    find_session,
    find_workout,
    generate_meditation_sessions,
    generate_workouts,
)
from .base import (
    async_command,
    echo_error,
    echo_header,
    echo_info,
    ensure_initialized,
    format_table,
    load_profile_service,
    truncate,
)


@click.group()
@click.pass_context
def workouts(ctx):
    """Browse workouts for your goal and level."""
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.option("--all", "show_all", is_flag=True, help="Include workouts for every goal")
@async_command
async def list_workouts(show_all: bool):
    """List available workouts."""
    profile = (await load_profile_service()).profile
    items = all_workouts(profile.fitness_level) if show_all else generate_workouts(profile)

    headers = ["Name", "Category", "Level", "Duration", "Exercises"]
    rows = [
        [
            truncate(w.name),
            w.category.value,
            w.difficulty.value,
            w.formatted_duration,
            str(len(w.exercises)),
        ]
        for w in items
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(items)} workout(s) for {profile.fitness_goal.value}")


@workouts.command(name="show")
@click.argument("name")
@click.pass_context
@async_command
async def show_workout(ctx, name: str):
    """Show the exercises of a workout."""
    profile = (await load_profile_service()).profile
    workout = find_workout(all_workouts(profile.fitness_level), name)
    if workout is None:
        echo_error(f"Workout '{name}' not found")
        ctx.exit(1)

    echo_header(workout.name)
    click.echo(workout.get_summary())


@click.group()
@click.pass_context
def meditations(ctx):
    """Browse guided meditation sessions."""
    ensure_initialized(ctx)


@meditations.command(name="list")
@click.option("--all", "show_all", is_flag=True, help="Ignore the preferred duration")
@async_command
async def list_meditations(show_all: bool):
    """List meditation sessions near your preferred length."""
    profile = (await load_profile_service()).profile
    items = all_meditation_sessions() if show_all else generate_meditation_sessions(profile)

    if not items:
        echo_info("No sessions match your preferred duration. Try --all")
        return

    headers = ["Title", "Category", "Level", "Duration", "Sound"]
    rows = [
        [
            truncate(s.title),
            s.category.value,
            s.difficulty.value,
            s.formatted_duration,
            s.background_sound.value,
        ]
        for s in items
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(items)} session(s)")


@meditations.command(name="show")
@click.argument("title")
@click.pass_context
@async_command
async def show_meditation(ctx, title: str):
    """Show the guidance script of a session."""
    session = find_session(all_meditation_sessions(), title)
    if session is None:
        echo_error(f"Meditation '{title}' not found")
        ctx.exit(1)

    echo_header(session.title)
    click.echo(session.get_summary())

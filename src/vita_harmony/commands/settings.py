"""App settings commands."""

import re

import click

from ..db import ProfileRepository, get_db_path
from ..models.settings import AppSettings
from .base import async_command, echo_error, echo_success, ensure_initialized

REMINDER_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _on_off(value: bool) -> str:
    return "on" if value else "off"


@click.group()
@click.pass_context
def settings(ctx):
    """View and change app settings."""
    ensure_initialized(ctx)


@settings.command()
@async_command
async def show():
    """Show all settings."""
    current = await ProfileRepository(db_path=get_db_path()).get_settings()
    click.echo(f"Notifications: {_on_off(current.notifications_enabled)}")
    click.echo(f"Reminder time: {current.reminder_time}")
    click.echo(f"Sound:         {_on_off(current.sound_enabled)}")
    click.echo(f"Haptics:       {_on_off(current.haptics_enabled)}")
    click.echo(f"Dark mode:     {_on_off(current.dark_mode_enabled)}")


@settings.command()
@click.argument("name", type=click.Choice(AppSettings.TOGGLES))
@async_command
async def toggle(name: str):
    """Flip an on/off setting."""
    repo = ProfileRepository(db_path=get_db_path())
    current = await repo.get_settings()
    value = current.toggle(name)
    await repo.save_settings(current)
    echo_success(f"{name.replace('_', ' ').capitalize()} turned {_on_off(value)}")


@settings.command()
@click.argument("time")
@click.pass_context
@async_command
async def reminder(ctx, time: str):
    """Set the daily reminder time (HH:MM)."""
    if not REMINDER_PATTERN.match(time):
        echo_error(f"Invalid time '{time}', expected HH:MM")
        ctx.exit(1)

    repo = ProfileRepository(db_path=get_db_path())
    current = await repo.get_settings()
    current.reminder_time = time
    await repo.save_settings(current)
    echo_success(f"Reminder set for {time}")

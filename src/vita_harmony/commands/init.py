"""Initialize project command."""

import click

from ..config import get_settings
from ..db import ProfileRepository, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the vita-harmony data directory and database.

    Creates the data directory, the key-value table and a guest profile
    if none is stored yet.
    """
    settings = get_settings()
    echo_info(f"Initializing vita-harmony in {settings.data_dir}")

    db_path = settings.get_db_path()
    await init_db(db_path)
    echo_success("Database initialized")

    repo = ProfileRepository(db_path=db_path)
    profile = await repo.get_profile()
    await repo.save_profile(profile)
    settings_record = await repo.get_settings()
    await repo.save_settings(settings_record)

    click.echo()
    click.echo("vita-harmony is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Tell us about yourself:")
    click.echo("     vita-harmony onboard")
    click.echo()
    click.echo("  2. Start a session:")
    click.echo("     vita-harmony workouts list")
    click.echo('     vita-harmony play workout "Full Body Workout"')

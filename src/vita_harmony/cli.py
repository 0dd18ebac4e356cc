"""CLI entry point for vita-harmony."""

import logging

import click

from .commands import (
    gate,
    history,
    init,
    meditations,
    onboard,
    play,
    profile,
    serve,
    settings,
    workouts,
)
from .config import get_settings


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.version_option(version="0.1.0", prog_name="vita-harmony")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """vita-harmony: workouts and guided meditation in your terminal.

    Personalized workouts and meditation sessions with a live coach,
    daily streaks and progress stats.

    Example usage:

        # Initialize and set up your profile
        vita-harmony init
        vita-harmony onboard

        # Find and play a session
        vita-harmony workouts list
        vita-harmony play workout "Full Body Workout"
        vita-harmony play meditation "Box Breathing"

        # Check your progress
        vita-harmony history
    """
    configure_logging(verbose)


main.add_command(init)
main.add_command(onboard)
main.add_command(profile)
main.add_command(settings)
main.add_command(workouts)
main.add_command(meditations)
main.add_command(play)
main.add_command(history)
main.add_command(gate)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()

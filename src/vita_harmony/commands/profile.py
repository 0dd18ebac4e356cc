"""Profile and account commands."""

import click

from ..models.user_profile import FitnessGoal, FitnessLevel
from ..services.feedback import streak_message
from .base import (
    async_command,
    echo_error,
    echo_header,
    echo_info,
    echo_success,
    ensure_initialized,
    load_profile_service,
)

GOAL_CHOICES = [g.value for g in FitnessGoal]
LEVEL_CHOICES = [lv.value for lv in FitnessLevel]


@click.group()
@click.pass_context
def profile(ctx):
    """View and manage your profile."""
    ensure_initialized(ctx)


@profile.command()
@async_command
async def show():
    """Show the current profile."""
    service = await load_profile_service()
    p = service.profile

    echo_header(f"Profile: {p.name}")
    click.echo(p.get_summary())
    if p.age is not None:
        click.echo(f"Age: {p.age}")
    bmi = p.bmi()
    if bmi is not None:
        click.echo(f"BMI: {bmi:.1f} ({p.bmi_category()})")
    click.echo(f"Workouts: {p.total_workouts}")
    click.echo(f"Meditation: {p.total_meditation_minutes} min")
    if p.streak > 0:
        click.echo(f"Streak: {p.streak} day(s) - {streak_message(p.streak)}")


@profile.command()
@click.option("--name", help="Display name")
@click.option("--email", help="Email address")
@click.option("--goal", type=click.Choice(GOAL_CHOICES), help="Primary fitness goal")
@click.option("--level", type=click.Choice(LEVEL_CHOICES), help="Fitness level")
@click.option("--age", type=click.IntRange(min=1), help="Age in years")
@click.option("--weight", type=click.FloatRange(min=0, min_open=True), help="Weight in kg")
@click.option("--height", type=click.FloatRange(min=0, min_open=True), help="Height in cm")
@click.pass_context
@async_command
async def update(ctx, name, email, goal, level, age, weight, height):
    """Update profile fields."""
    fields = {
        "name": name,
        "email": email,
        "fitness_goal": goal,
        "fitness_level": level,
        "age": age,
        "weight": weight,
        "height": height,
    }
    if all(v is None for v in fields.values()):
        echo_error("Nothing to update. Pass at least one option.")
        ctx.exit(1)

    service = await load_profile_service()
    await service.update_profile(**fields)
    echo_success("Profile updated")


@profile.command()
@click.option("--workout-minutes", type=click.IntRange(15, 60), help="Preferred workout length")
@click.option("--meditation-minutes", type=click.IntRange(5, 30), help="Preferred meditation length")
@async_command
async def prefs(workout_minutes, meditation_minutes):
    """Show or change preferred session durations."""
    service = await load_profile_service()

    if workout_minutes is not None:
        await service.set_workout_duration(workout_minutes)
    if meditation_minutes is not None:
        await service.set_meditation_duration(meditation_minutes)

    p = service.profile
    click.echo(f"Workout duration: {p.preferred_workout_duration} min")
    click.echo(f"Meditation duration: {p.preferred_meditation_duration} min")


@profile.command()
@click.confirmation_option(prompt="This deletes all your data. Continue?")
@async_command
async def delete():
    """Delete all stored data and start over as a guest."""
    service = await load_profile_service()
    await service.delete_account()
    echo_success("Account deleted")
    echo_info("Run 'vita-harmony onboard' to set up a new profile")


@profile.command()
@async_command
async def logout():
    """Sign out and continue as a guest."""
    service = await load_profile_service()
    await service.logout()
    echo_success("Logged out")

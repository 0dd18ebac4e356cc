"""Activity history and dashboard command."""

import click

from ..services.feedback import (
    motivational_quote,
    next_workout_recommendation,
    streak_message,
    wellness_tip,
)
from ..services.stats import compute_stats
from .base import (
    async_command,
    echo_header,
    echo_info,
    ensure_initialized,
    format_table,
    history_repository,
    load_profile_service,
    truncate,
)


@click.command()
@click.option("--limit", "-n", default=5, type=click.IntRange(min=1), help="Recent items to show")
@click.pass_context
@async_command
async def history(ctx, limit: int):
    """Show your dashboard: stats, streak and recent sessions."""
    ensure_initialized(ctx)

    profile = (await load_profile_service()).profile
    repo = history_repository()
    workouts = await repo.get_workouts()
    sessions = await repo.get_meditations()
    stats = compute_stats(workouts, sessions)

    echo_header(f"Dashboard for {profile.name}")
    if profile.streak > 0:
        click.echo(click.style(streak_message(profile.streak), fg="green"))
    click.echo()
    click.echo(f"Workouts:   {stats.total_workouts} total, {stats.workouts_this_week} this week")
    click.echo(f"Calories:   {stats.total_calories} kcal")
    if stats.total_workouts:
        click.echo(f"Avg length: {stats.average_workout_duration // 60} min")
    click.echo(
        f"Meditation: {stats.total_meditations} session(s), "
        f"{stats.total_meditation_minutes} min, {stats.meditations_this_week} this week"
    )
    if stats.total_meditations:
        click.echo(f"Avg focus:  {stats.average_focus_score:.0%}")

    rows = []
    for w in workouts:
        rows.append(
            (
                w.completed_at,
                [
                    w.completed_at.strftime("%Y-%m-%d %H:%M") if w.completed_at else "N/A",
                    "Workout",
                    truncate(w.name),
                    f"{w.performance:.0%}" if w.performance is not None else "-",
                ],
            )
        )
    for s in sessions:
        rows.append(
            (
                s.completed_at,
                [
                    s.completed_at.strftime("%Y-%m-%d %H:%M") if s.completed_at else "N/A",
                    "Meditation",
                    truncate(s.title),
                    f"{s.focus_score:.0%}" if s.focus_score is not None else "-",
                ],
            )
        )

    if rows:
        rows.sort(key=lambda r: (r[0] is not None, r[0]), reverse=True)
        click.echo()
        click.echo(format_table(["When", "Type", "Name", "Score"], [r[1] for r in rows[:limit]]))
    else:
        click.echo()
        echo_info("No sessions yet. Try 'vita-harmony play workout <name>'")
        click.echo(motivational_quote("workout"))

    last_performance = next(
        (w.performance for w in reversed(workouts) if w.performance is not None), None
    )
    if last_performance is not None:
        click.echo()
        click.echo(next_workout_recommendation(last_performance))

    click.echo()
    click.echo(click.style("Tip: ", bold=True) + wellness_tip())

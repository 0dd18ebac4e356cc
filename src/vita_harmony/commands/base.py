"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import get_settings
from ..db import HistoryRepository, ProfileRepository, get_db_path
from ..services.profile import ProfileService


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'vita-harmony init' first."
        )
        ctx.exit(1)


async def load_profile_service() -> ProfileService:
    """Profile service over the configured database and timezone."""
    settings = get_settings()
    return await ProfileService.load(ProfileRepository(db_path=get_db_path()), settings.timezone)


def history_repository() -> HistoryRepository:
    return HistoryRepository(db_path=get_db_path())


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def echo_header(title: str, width: int = 60) -> None:
    click.echo()
    click.echo("=" * width)
    click.echo(title)
    click.echo("=" * width)


def truncate(text: str, length: int = 30) -> str:
    return text[:length] + "..." if len(text) > length else text


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format rows as a left-aligned text table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    def render(cells) -> str:
        return "".join(str(c).ljust(widths[i] + padding) for i, c in enumerate(cells)).rstrip()

    lines = [render(headers), render("-" * w for w in widths)]
    lines.extend(render(row) for row in rows)
    return "\n".join(lines)

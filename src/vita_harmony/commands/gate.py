"""Gate check command."""

import click

from ..config import get_settings
from ..services.gate import DisplayModeState, resolve_display_mode
from .base import async_command, echo_info


@click.command()
@click.option("--url", help="Override the configured gate URL")
@async_command
async def gate(url: str | None):
    """Check which display mode the remote gate selects."""
    settings = get_settings()
    if url is not None:
        settings = settings.model_copy(update={"gate_url": url})

    if not settings.gate_url:
        echo_info("No gate URL configured (VITA_GATE_URL)")

    state = DisplayModeState()
    result = await resolve_display_mode(state, settings)

    status = result.status_code if result.status_code is not None else "no response"
    click.echo(f"Status: {status}")
    click.echo(f"Display mode: {click.style(state.mode.value, bold=True)}")

"""Onboarding command."""

import click

from ..onboarding import OnboardingQuestionnaire
from .base import async_command, echo_success, ensure_initialized, load_profile_service


@click.command()
@click.pass_context
@async_command
async def onboard(ctx: click.Context):
    """Set your goal, level and session lengths.

    Answers replace the current profile; choose guest mode to skip the
    account details.
    """
    ensure_initialized(ctx)

    service = await load_profile_service()
    profile = await OnboardingQuestionnaire().collect_profile()
    await service.complete_onboarding(profile)

    click.echo()
    click.echo(profile.get_summary())
    echo_success("Onboarding complete")

"""Interactive onboarding questionnaire."""

import questionary
from questionary import Style

from ..models.user_profile import FitnessGoal, FitnessLevel, UserProfile

custom_style = Style(
    [
        ("qmark", "fg:#4caf50 bold"),
        ("question", "bold"),
        ("answer", "fg:#26a69a bold"),
        ("pointer", "fg:#4caf50 bold"),
        ("highlighted", "fg:#4caf50 bold"),
        ("selected", "fg:#26a69a"),
        ("separator", "fg:#26a69a"),
        ("instruction", ""),
        ("text", ""),
    ]
)

WORKOUT_DURATIONS = list(range(15, 61, 5))
MEDITATION_DURATIONS = list(range(5, 31, 5))


def _parse_int(value: str | None) -> int | None:
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def _parse_float(value: str | None) -> float | None:
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


class OnboardingQuestionnaire:
    """Collects goals, level, durations and account details."""

    async def collect_profile(self) -> UserProfile:
        """Run the questionnaire and build a profile from the answers."""
        print("\n=== Welcome to Vita Harmony ===\n")

        goal = await questionary.select(
            "What's your main goal?",
            choices=[questionary.Choice(g.value, g) for g in FitnessGoal],
            default=FitnessGoal.GENERAL.value,
            style=custom_style,
        ).ask_async()

        level = await questionary.select(
            "What's your fitness level?",
            choices=[questionary.Choice(lv.value, lv) for lv in FitnessLevel],
            style=custom_style,
        ).ask_async()

        workout_minutes = await questionary.select(
            "Preferred workout duration?",
            choices=[questionary.Choice(f"{m} minutes", m) for m in WORKOUT_DURATIONS],
            default="30 minutes",
            style=custom_style,
        ).ask_async()

        meditation_minutes = await questionary.select(
            "Preferred meditation duration?",
            choices=[questionary.Choice(f"{m} minutes", m) for m in MEDITATION_DURATIONS],
            default="10 minutes",
            style=custom_style,
        ).ask_async()

        age = _parse_int(
            await questionary.text("Your age (optional):", style=custom_style).ask_async()
        )

        create_account = await questionary.confirm(
            "Create an account? (No continues as guest)",
            default=False,
            style=custom_style,
        ).ask_async()

        profile = UserProfile(
            fitness_goal=goal or FitnessGoal.GENERAL,
            fitness_level=level or FitnessLevel.BEGINNER,
            age=age,
            is_guest=not create_account,
            preferred_workout_duration=workout_minutes or 30,
            preferred_meditation_duration=meditation_minutes or 10,
        )

        if create_account:
            profile.name = await questionary.text(
                "What's your name?", style=custom_style
            ).ask_async() or "Guest"
            profile.email = await questionary.text(
                "Email:", style=custom_style
            ).ask_async() or ""

            add_body = await questionary.confirm(
                "Add weight and height for calorie estimates? (optional)",
                default=False,
                style=custom_style,
            ).ask_async()
            if add_body:
                profile.weight = _parse_float(
                    await questionary.text("Weight (kg):", style=custom_style).ask_async()
                )
                profile.height = _parse_float(
                    await questionary.text("Height (cm):", style=custom_style).ask_async()
                )

        return profile

"""Static workout and meditation content."""

from .meditations import (
    adapt_session,
    all_meditation_sessions,
    find_session,
    generate_meditation_sessions,
    instructions_in_window,
)
from .workouts import (
    adapt_workout,
    all_workouts,
    calculate_calories,
    find_workout,
    generate_workouts,
)

__all__ = [
    "adapt_session",
    "adapt_workout",
    "all_meditation_sessions",
    "all_workouts",
    "calculate_calories",
    "find_session",
    "find_workout",
    "generate_meditation_sessions",
    "generate_workouts",
    "instructions_in_window",
]

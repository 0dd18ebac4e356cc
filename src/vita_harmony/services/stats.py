"""Dashboard statistics over workout and meditation history."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..models.meditation import MeditationSession
from ..models.workout import Workout


@dataclass
class DashboardStats:
    """Aggregated activity numbers."""

    total_workouts: int
    total_calories: int
    average_workout_duration: int  # seconds
    workouts_this_week: int
    total_meditations: int
    total_meditation_minutes: int
    average_focus_score: float
    meditations_this_week: int

    def to_dict(self) -> dict:
        return {
            "total_workouts": self.total_workouts,
            "total_calories": self.total_calories,
            "average_workout_duration": self.average_workout_duration,
            "workouts_this_week": self.workouts_this_week,
            "total_meditations": self.total_meditations,
            "total_meditation_minutes": self.total_meditation_minutes,
            "average_focus_score": self.average_focus_score,
            "meditations_this_week": self.meditations_this_week,
        }


def _completed_since(items, since: datetime) -> int:
    return sum(1 for item in items if item.completed_at and item.completed_at > since)


def total_calories(workouts: list[Workout]) -> int:
    return sum(w.calories_burned for w in workouts)


def average_workout_duration(workouts: list[Workout]) -> int:
    if not workouts:
        return 0
    return sum(w.duration for w in workouts) // len(workouts)


def total_meditation_minutes(sessions: list[MeditationSession]) -> int:
    return sum(s.duration // 60 for s in sessions)


def average_focus_score(sessions: list[MeditationSession]) -> float:
    scored = [s.focus_score for s in sessions if s.focus_score is not None]
    if not scored:
        return 0.0
    return sum(scored) / len(scored)


def compute_stats(
    workouts: list[Workout],
    meditations: list[MeditationSession],
    now: datetime | None = None,
) -> DashboardStats:
    """Compute dashboard statistics; "this week" means the last 7 days."""
    now = now or datetime.now()
    week_ago = now - timedelta(days=7)

    return DashboardStats(
        total_workouts=len(workouts),
        total_calories=total_calories(workouts),
        average_workout_duration=average_workout_duration(workouts),
        workouts_this_week=_completed_since(workouts, week_ago),
        total_meditations=len(meditations),
        total_meditation_minutes=total_meditation_minutes(meditations),
        average_focus_score=average_focus_score(meditations),
        meditations_this_week=_completed_since(meditations, week_ago),
    )

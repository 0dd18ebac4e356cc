"""Core services: session playback, feedback, streaks, profile and gate check."""

from .gate import (
    DisplayMode,
    DisplayModeState,
    GateResult,
    check_gate,
    classify,
    resolve_display_mode,
)
from .player import MeditationPlayer, WorkoutPlayer
from .profile import ProfileService
from .runner import SessionRunner
from .stats import DashboardStats, compute_stats
from .streak import local_today, update_streak

__all__ = [
    "check_gate",
    "classify",
    "compute_stats",
    "DashboardStats",
    "DisplayMode",
    "DisplayModeState",
    "GateResult",
    "local_today",
    "MeditationPlayer",
    "ProfileService",
    "resolve_display_mode",
    "SessionRunner",
    "update_streak",
    "WorkoutPlayer",
]

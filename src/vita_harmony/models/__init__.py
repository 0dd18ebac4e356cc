"""Data models for vita-harmony."""

from .meditation import (
    BackgroundSound,
    InteractionType,
    MeditationCategory,
    MeditationDifficulty,
    MeditationInstruction,
    MeditationSession,
)
from .session import ActiveMeditation, ActiveWorkout, EventKind, PlayerEvent, PlayerState
from .settings import AppSettings
from .user_profile import FitnessGoal, FitnessLevel, UserProfile
from .workout import Exercise, Workout, WorkoutCategory

__all__ = [
    "ActiveMeditation",
    "ActiveWorkout",
    "AppSettings",
    "BackgroundSound",
    "EventKind",
    "Exercise",
    "FitnessGoal",
    "FitnessLevel",
    "InteractionType",
    "MeditationCategory",
    "MeditationDifficulty",
    "MeditationInstruction",
    "MeditationSession",
    "PlayerEvent",
    "PlayerState",
    "UserProfile",
    "Workout",
    "WorkoutCategory",
]

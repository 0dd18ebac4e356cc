"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from vita_harmony.config import Settings
from vita_harmony.models.meditation import (
    BackgroundSound,
    InteractionType,
    MeditationCategory,
    MeditationDifficulty,
    MeditationInstruction,
    MeditationSession,
)
from vita_harmony.models.user_profile import FitnessGoal, FitnessLevel, UserProfile
from vita_harmony.models.workout import Exercise, Workout, WorkoutCategory


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the configured data directory at a temporary folder."""
    monkeypatch.setenv("VITA_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("VITA_GATE_URL", "")
    return tmp_path


@pytest.fixture
def fast_settings(tmp_path):
    """Settings with an instant clock and no reset delay."""
    return Settings(
        data_dir=tmp_path,
        tick_interval=0,
        workout_reset_delay=0,
        meditation_reset_delay=0,
    )


@pytest.fixture
def sample_user_profile():
    """Create a sample user profile for testing."""
    return UserProfile(
        name="Test User",
        email="test@example.com",
        fitness_goal=FitnessGoal.MUSCLE_GAIN,
        fitness_level=FitnessLevel.INTERMEDIATE,
        age=32,
        weight=80.0,
        height=180.0,
        preferred_workout_duration=45,
        preferred_meditation_duration=10,
    )


@pytest.fixture
def short_workout():
    """Three exercises of 10, 20 and 30 seconds; the second has rest."""
    return Workout(
        name="Test Circuit",
        description="Short circuit for tests",
        duration=60,
        difficulty=FitnessLevel.BEGINNER,
        category=WorkoutCategory.HIIT,
        exercises=[
            Exercise(name="Squats", description="Squat down", duration=10),
            Exercise(name="Push-ups", description="Push up", duration=20, rest_time=15),
            Exercise(name="Plank", description="Hold", duration=30),
        ],
        calories_burned=10,
    )


@pytest.fixture
def short_meditation():
    """Two-minute session with instructions at 0, 3, 10 and 30 seconds."""
    return MeditationSession(
        title="Test Breathing",
        description="Short session for tests",
        duration=120,
        category=MeditationCategory.BREATHWORK,
        difficulty=MeditationDifficulty.BEGINNER,
        background_sound=BackgroundSound.NONE,
        instructions=[
            MeditationInstruction(timestamp=0, text="Settle in"),
            MeditationInstruction(
                timestamp=3,
                text="Breathe in",
                is_interactive=True,
                interaction_type=InteractionType.BREATH_IN,
            ),
            MeditationInstruction(
                timestamp=10,
                text="Hold",
                is_interactive=True,
                interaction_type=InteractionType.HOLD,
            ),
            MeditationInstruction(timestamp=30, text="Release"),
        ],
    )

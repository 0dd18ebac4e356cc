"""Tests for data models."""

from datetime import datetime

import pytest

from vita_harmony.models.meditation import MeditationSession
from vita_harmony.models.session import ActiveMeditation
from vita_harmony.models.settings import AppSettings
from vita_harmony.models.user_profile import FitnessGoal, FitnessLevel, UserProfile
from vita_harmony.models.workout import Workout


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_defaults(self):
        profile = UserProfile()

        assert profile.name == "Guest"
        assert profile.fitness_goal == FitnessGoal.GENERAL
        assert profile.fitness_level == FitnessLevel.BEGINNER
        assert profile.preferred_workout_duration == 30
        assert profile.preferred_meditation_duration == 10
        assert profile.streak == 0

    def test_profile_round_trip(self, sample_user_profile):
        """Test that to_dict/from_dict preserve every field."""
        restored = UserProfile.from_dict(sample_user_profile.to_dict())
        assert restored == sample_user_profile

    def test_profile_to_dict_uses_enum_values(self, sample_user_profile):
        data = sample_user_profile.to_dict()

        assert data["fitness_goal"] == "Muscle Gain"
        assert data["fitness_level"] == "Intermediate"

    def test_from_dict_rejects_unknown_goal(self, sample_user_profile):
        data = sample_user_profile.to_dict()
        data["fitness_goal"] = "Jetpack"

        with pytest.raises(ValueError):
            UserProfile.from_dict(data)

    @pytest.mark.parametrize(
        "key,value",
        [
            ("total_workouts", "7"),
            ("streak", 1.5),
            ("weight", "heavy"),
            ("is_guest", "yes"),
            ("preferred_workout_duration", None),
        ],
    )
    def test_from_dict_rejects_wrong_types(self, sample_user_profile, key, value):
        data = sample_user_profile.to_dict()
        data[key] = value

        with pytest.raises(TypeError, match=key):
            UserProfile.from_dict(data)

    def test_from_dict_accepts_integer_weight(self, sample_user_profile):
        data = sample_user_profile.to_dict()
        data["weight"] = 75

        assert UserProfile.from_dict(data).weight == 75.0

    def test_bmi(self, sample_user_profile):
        assert sample_user_profile.bmi() == pytest.approx(24.69, abs=0.01)
        assert sample_user_profile.bmi_category() == "Normal"

    def test_bmi_missing_height(self):
        profile = UserProfile(weight=70.0)

        assert profile.bmi() is None
        assert profile.bmi_category() == "N/A"

    @pytest.mark.parametrize(
        "weight,expected",
        [(50.0, "Underweight"), (90.0, "Overweight"), (110.0, "Obese")],
    )
    def test_bmi_categories(self, weight, expected):
        assert UserProfile(weight=weight, height=180.0).bmi_category() == expected


class TestWorkout:
    """Tests for Workout model."""

    def test_formatted_duration(self, short_workout):
        assert short_workout.formatted_duration == "1m"
        short_workout.duration = 930
        assert short_workout.formatted_duration == "15m 30s"

    def test_total_exercise_duration(self, short_workout):
        assert short_workout.total_exercise_duration == 60

    def test_round_trip(self, short_workout):
        short_workout.performance = 0.8
        restored = Workout.from_dict(short_workout.to_dict())

        assert restored == short_workout
        assert restored.exercises[1].rest_time == 15


class TestMeditationSession:
    """Tests for MeditationSession model."""

    def test_formatted_duration(self, short_meditation):
        assert short_meditation.formatted_duration == "2 min"

    def test_round_trip(self, short_meditation):
        restored = MeditationSession.from_dict(short_meditation.to_dict())
        assert restored == short_meditation


class TestActiveMeditation:
    """Tests for the focus score of an active meditation."""

    def test_focus_score_fraction_of_positive(self, short_meditation):
        active = ActiveMeditation(session=short_meditation, start_time=datetime.now())
        active.interaction_responses = [True, True, False, True]

        assert active.focus_score == 0.75

    def test_focus_score_empty(self, short_meditation):
        active = ActiveMeditation(session=short_meditation, start_time=datetime.now())
        assert active.focus_score == 0.0


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self):
        settings = AppSettings()

        assert settings.notifications_enabled
        assert settings.reminder_time == "09:00"

    def test_toggle(self):
        settings = AppSettings()

        assert settings.toggle("sound") is False
        assert settings.sound_enabled is False
        assert settings.toggle("sound") is True

    def test_toggle_unknown(self):
        with pytest.raises(ValueError):
            AppSettings().toggle("volume")

    def test_from_partial_dict(self):
        settings = AppSettings.from_dict({"dark_mode_enabled": False})

        assert settings.dark_mode_enabled is False
        assert settings.haptics_enabled is True

"""Tests for coach and feedback messages."""

import random

import pytest

from vita_harmony.models.meditation import MeditationCategory
from vita_harmony.services import feedback


class TestWorkoutMessages:
    """Tests for workout encouragement and completion messages."""

    @pytest.mark.parametrize(
        "progress,expected",
        [
            (0.0, "Great start! Keep that energy up!"),
            (0.25, "You're doing great! Halfway there!"),
            (0.5, "Almost there! You're so strong!"),
            (0.75, "Final push! You've got this!"),
            (1.0, "Final push! You've got this!"),
        ],
    )
    def test_encouragement_buckets(self, progress, expected):
        assert feedback.workout_encouragement(progress, "Squats") == expected

    def test_encouragement_random_stays_in_bucket(self):
        rng = random.Random(7)
        early = {
            "Great start! Keep that energy up!",
            "You've got this! Let's go!",
            "Perfect form on those Squats!",
            "Strong start! Keep pushing!",
            "Excellent! You're doing amazing!",
        }
        for _ in range(20):
            assert feedback.workout_encouragement(0.1, "Squats", rng) in early

    @pytest.mark.parametrize(
        "performance,prefix",
        [
            (0.9, "Outstanding"),
            (0.8, "Great job"),
            (0.61, "Great job"),
            (0.6, "Good work"),
            (0.4, "You did it"),
            (0.0, "You did it"),
        ],
    )
    def test_completion_thresholds_are_strict(self, performance, prefix):
        assert feedback.workout_completion_message(performance).startswith(prefix)

    def test_rest_message(self):
        assert feedback.rest_message() == "Take a deep breath and recover."
        assert feedback.rest_message(random.Random(1)) in feedback.REST_MESSAGES


class TestMeditationMessages:
    """Tests for meditation guidance and completion messages."""

    def test_guidance_at_minute(self):
        message = feedback.meditation_guidance(MeditationCategory.BREATHWORK, 120)
        assert message.startswith("Notice how your breathing")

    def test_guidance_missing(self):
        assert feedback.meditation_guidance(MeditationCategory.SLEEP, 120) is None
        assert feedback.meditation_guidance(MeditationCategory.BREATHWORK, 60) is None

    @pytest.mark.parametrize(
        "score,prefix",
        [(0.81, "Exceptional"), (0.8, "Great session"), (0.5, "Nice work"), (0.4, "You completed")],
    )
    def test_completion_message(self, score, prefix):
        assert feedback.meditation_completion_message(score).startswith(prefix)


class TestStreakMessage:
    """Tests for streak milestone messages."""

    @pytest.mark.parametrize(
        "streak,expected",
        [
            (1, "Great start!"),
            (7, "Amazing! One week streak!"),
            (21, "3 weeks of consistency!"),
            (100, "100 DAYS!"),
            (3, "Day 3!"),
        ],
    )
    def test_messages(self, streak, expected):
        assert feedback.streak_message(streak).startswith(expected)

    def test_large_multiple_of_fifty(self):
        # 150 is not a multiple of 7
        assert feedback.streak_message(150).startswith("150 days!")


class TestAnalysis:
    """Tests for performance summaries."""

    def test_workout_all_completed(self):
        text = feedback.analyze_workout_performance([True, True, True], 0.9)
        assert text == "Perfect! You completed every exercise! Your performance was outstanding!"

    def test_workout_half_completed(self):
        text = feedback.analyze_workout_performance([True, False], 0.7)
        assert text.startswith("Every start counts!")
        assert text.endswith("You performed well today!")

    def test_workout_no_exercises(self):
        text = feedback.analyze_workout_performance([], 0.5)
        assert text.startswith("Every start counts!")

    def test_meditation_summary(self):
        text = feedback.analyze_meditation_performance(0.7, 1260)
        assert "Great focus!" in text
        assert "You meditated for 21 minutes." in text
        assert text.endswith("That's an impressive duration!")

    def test_next_workout_recommendation(self):
        assert feedback.next_workout_recommendation(0.9).startswith("You're ready for a challenge")
        assert feedback.next_workout_recommendation(0.5).startswith("Focus on consistency")


def test_motivational_quote_category():
    assert feedback.motivational_quote("Workout") == feedback.WORKOUT_QUOTES[0]
    assert feedback.motivational_quote("Breathwork") == feedback.MEDITATION_QUOTES[0]


def test_wellness_tip():
    assert feedback.wellness_tip(random.Random(3)) in feedback.WELLNESS_TIPS

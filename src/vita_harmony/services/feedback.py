"""Coach and feedback messages.

Every function here is pure: it maps a score, progress value or counter to a
message. Each bucket holds a pool of phrasings; the first entry is the
canonical one and is returned unless a ``random.Random`` is passed, in which
case a random entry of the same bucket is picked.
"""

import random

from ..models.meditation import MeditationCategory

WORKOUT_QUOTES = [
    "Push yourself, because no one else is going to do it for you.",
    "Great things never come from comfort zones.",
    "The only bad workout is the one that didn't happen.",
    "Your body can stand almost anything. It's your mind you have to convince.",
    "Fitness is not about being better than someone else. "
    "It's about being better than you used to be.",
]

MEDITATION_QUOTES = [
    "The present moment is filled with joy and happiness. "
    "If you are attentive, you will see it.",
    "Meditation is not evasion; it is a serene encounter with reality.",
    "In the midst of movement and chaos, keep stillness inside of you.",
    "Peace comes from within. Do not seek it without.",
    "The thing about meditation is you become more and more you.",
]

REST_MESSAGES = [
    "Take a deep breath and recover.",
    "Good job! Use this time to recharge.",
    "Rest well, you've earned it!",
    "Breathe deeply and prepare for the next set.",
    "Recovery is just as important as the workout.",
]

WELLNESS_TIPS = [
    "Stay hydrated! Drink at least 8 glasses of water today.",
    "Quality sleep is crucial for recovery. Aim for 7-9 hours tonight.",
    "Protein helps muscle recovery. Include it in your post-workout meal.",
    "Stretch daily to improve flexibility and prevent injury.",
    "Progressive overload is key to improvement. "
    "Gradually increase your workout intensity.",
    "Rest days are essential! Your muscles grow during recovery.",
    "Consistency beats intensity. Show up regularly, even if you don't feel 100%.",
    "Mind-muscle connection improves results. Focus on the muscles you're working.",
    "Warm up properly to prevent injury and improve performance.",
    "Track your progress! What gets measured gets improved.",
]

# (category, minute) -> guidance shown once the minute is reached
MEDITATION_GUIDANCE = {
    (MeditationCategory.BREATHWORK, 2): (
        "Notice how your breathing is becoming more natural and rhythmic."
    ),
    (MeditationCategory.BREATHWORK, 5): "You're doing wonderfully. Stay with the breath.",
    (MeditationCategory.MINDFULNESS, 3): (
        "If your mind wanders, that's perfectly normal. Gently return to the present."
    ),
    (MeditationCategory.MINDFULNESS, 7): "Notice the stillness growing within you.",
    (MeditationCategory.STRESS_RELIEF, 2): "Feel the tension melting away with each breath.",
    (MeditationCategory.STRESS_RELIEF, 5): "You're releasing what no longer serves you.",
    (MeditationCategory.FOCUS, 3): (
        "Your concentration is strengthening. Keep your attention steady."
    ),
    (MeditationCategory.VISUALIZATION, 2): "Let the images come naturally. Don't force them.",
    (MeditationCategory.VISUALIZATION, 5): "Immerse yourself fully in this visualization.",
}


def _pick(pool: list[str], rng: random.Random | None) -> str:
    if rng is None:
        return pool[0]
    return rng.choice(pool)


def workout_encouragement(
    progress: float, exercise_name: str, rng: random.Random | None = None
) -> str:
    """Encouragement for the current exercise, bucketed by workout progress."""
    if progress < 0.25:
        pool = [
            "Great start! Keep that energy up!",
            "You've got this! Let's go!",
            f"Perfect form on those {exercise_name}!",
            "Strong start! Keep pushing!",
            "Excellent! You're doing amazing!",
        ]
    elif progress < 0.50:
        pool = [
            "You're doing great! Halfway there!",
            "Keep that momentum going!",
            "Look at you go! Impressive!",
            "You're crushing it! Don't stop now!",
            "Fantastic work! Keep it up!",
        ]
    elif progress < 0.75:
        pool = [
            "Almost there! You're so strong!",
            "You're in the zone! Keep going!",
            "Incredible effort! Push through!",
            "You're unstoppable today!",
            "Amazing! The finish line is near!",
        ]
    else:
        pool = [
            "Final push! You've got this!",
            "So close! Finish strong!",
            "You're about to crush this workout!",
            "Last stretch! Give it everything!",
            "Almost done! You're amazing!",
        ]
    return _pick(pool, rng)


def rest_message(rng: random.Random | None = None) -> str:
    return _pick(REST_MESSAGES, rng)


def workout_completion_message(performance: float) -> str:
    if performance > 0.8:
        return "Outstanding performance! You absolutely crushed that workout! 💪"
    if performance > 0.6:
        return "Great job! You completed the workout with solid effort!"
    if performance > 0.4:
        return "Good work! You finished the workout. Keep building that consistency!"
    return "You did it! Every workout counts. You're making progress!"


def meditation_guidance(category: MeditationCategory, elapsed_seconds: int) -> str | None:
    """Category-specific guidance for the given minute, if there is any."""
    return MEDITATION_GUIDANCE.get((category, elapsed_seconds // 60))


def meditation_completion_message(focus_score: float) -> str:
    if focus_score > 0.8:
        return "Exceptional focus! Your meditation practice is truly deepening. 🧘"
    if focus_score > 0.6:
        return "Great session! You maintained good focus throughout."
    if focus_score > 0.4:
        return "Nice work! Each meditation strengthens your practice."
    return (
        "You completed the session! Remember, meditation is a journey, "
        "not a destination."
    )


def streak_message(streak: int) -> str:
    """Celebrate streak milestones."""
    milestones = {
        1: "Great start! You've begun your journey to better health! 🎉",
        7: "Amazing! One week streak! You're building a powerful habit! 🔥",
        14: "Two weeks strong! Your consistency is impressive! ⭐",
        30: "30 days! You're officially a wellness warrior! 🏆",
        50: "50 days! Your dedication is truly inspiring! 💎",
        100: "100 DAYS! You're a true champion! This is legendary! 👑",
    }
    if streak in milestones:
        return milestones[streak]
    if streak > 0 and streak % 7 == 0:
        return f"{streak // 7} weeks of consistency! Keep the momentum going! 🚀"
    if streak > 100 and streak % 50 == 0:
        return f"{streak} days! You're unstoppable! 🌟"
    return f"Day {streak}! Your commitment is paying off!"


def motivational_quote(category: str, rng: random.Random | None = None) -> str:
    """Workout quote for workout/fitness categories, meditation quote otherwise."""
    lowered = category.lower()
    if "workout" in lowered or "fitness" in lowered:
        return _pick(WORKOUT_QUOTES, rng)
    return _pick(MEDITATION_QUOTES, rng)


def wellness_tip(rng: random.Random | None = None) -> str:
    return _pick(WELLNESS_TIPS, rng)


def analyze_workout_performance(completion_flags: list[bool], performance: float) -> str:
    """Summarize how much of the workout was completed and how well."""
    total = len(completion_flags)
    completion_rate = sum(1 for done in completion_flags if done) / total if total else 0.0

    if total and completion_rate == 1.0:
        feedback = "Perfect! You completed every exercise! "
    elif completion_rate > 0.75:
        feedback = "Excellent! You completed most of the workout! "
    elif completion_rate > 0.5:
        feedback = "Good effort! You made it through more than half! "
    else:
        feedback = "Every start counts! Try to complete more next time. "

    if performance > 0.8:
        feedback += "Your performance was outstanding!"
    elif performance > 0.6:
        feedback += "You performed well today!"
    else:
        feedback += "Keep building your strength and endurance!"

    return feedback


def analyze_meditation_performance(focus_score: float, duration_seconds: float) -> str:
    """Summarize focus quality and meditation length."""
    if focus_score > 0.8:
        feedback = "Your focus was exceptional! You're mastering the art of meditation. "
    elif focus_score > 0.6:
        feedback = "Great focus! You're making wonderful progress in your practice. "
    elif focus_score > 0.4:
        feedback = "Good session! Your meditation skills are developing. "
    else:
        feedback = (
            "You showed up and that's what matters! Each session improves your focus. "
        )

    minutes = int(duration_seconds) // 60
    feedback += f"You meditated for {minutes} minutes. "

    if minutes >= 20:
        feedback += "That's an impressive duration!"
    elif minutes >= 10:
        feedback += "A solid meditation length!"
    else:
        feedback += "Even short sessions have great benefits!"

    return feedback


def next_workout_recommendation(recent_performance: float) -> str:
    if recent_performance > 0.8:
        return (
            "You're ready for a challenge! Try increasing the intensity "
            "or duration of your next workout."
        )
    if recent_performance > 0.6:
        return "Great progress! Continue with your current routine or add some variety."
    return (
        "Focus on consistency. Stick with your current level and build your foundation."
    )

"""Guided meditation templates and session adaptation."""

import copy

from ..models.meditation import (
    BackgroundSound,
    InteractionType,
    MeditationCategory,
    MeditationDifficulty,
    MeditationInstruction,
    MeditationSession,
)
from ..models.user_profile import UserProfile

# Sessions within this many minutes of the preferred length are offered
DURATION_TOLERANCE_MINUTES = 10

# Instructions are shown when their timestamp falls in (elapsed - window, elapsed]
INSTRUCTION_WINDOW_SECONDS = 5

_I = MeditationInstruction
_T = InteractionType


def _breathwork_sessions() -> list[MeditationSession]:
    return [
        MeditationSession(
            title="Box Breathing",
            description="A calming breathwork technique used by athletes and professionals",
            duration=600,
            category=MeditationCategory.BREATHWORK,
            difficulty=MeditationDifficulty.BEGINNER,
            background_sound=BackgroundSound.OCEAN,
            instructions=[
                _I(0, "Welcome to Box Breathing. Find a comfortable seated position."),
                _I(10, "We'll breathe in a pattern of 4-4-4-4. Ready?"),
                _I(20, "Breathe in...", True, _T.BREATH_IN),
                _I(24, "Hold...", True, _T.HOLD),
                _I(28, "Breathe out...", True, _T.BREATH_OUT),
                _I(32, "Hold...", True, _T.HOLD),
                _I(36, "Continue this pattern...", True, _T.BREATH_IN),
                _I(300, "You're halfway there. Notice how calm you feel."),
                _I(570, "Begin to slow down your breathing."),
                _I(590, "Take one final deep breath and release. Well done."),
            ],
        ),
        MeditationSession(
            title="4-7-8 Breathing",
            description="A powerful technique for relaxation and sleep",
            duration=480,
            category=MeditationCategory.BREATHWORK,
            difficulty=MeditationDifficulty.BEGINNER,
            background_sound=BackgroundSound.RAIN,
            instructions=[
                _I(0, "Welcome. This technique helps you relax deeply."),
                _I(10, "Breathe in for 4 counts...", True, _T.BREATH_IN),
                _I(14, "Hold for 7 counts...", True, _T.HOLD),
                _I(21, "Exhale for 8 counts...", True, _T.BREATH_OUT),
                _I(29, "Again, breathe in...", True, _T.BREATH_IN),
                _I(240, "Feel the relaxation spreading through your body."),
                _I(460, "Prepare to finish the session."),
                _I(475, "Return to normal breathing. Excellent work."),
            ],
        ),
        MeditationSession(
            title="Energizing Breath",
            description="Activate your body and mind with this dynamic breathwork",
            duration=600,
            category=MeditationCategory.BREATHWORK,
            difficulty=MeditationDifficulty.INTERMEDIATE,
            background_sound=BackgroundSound.BELLS,
            instructions=[
                _I(0, "This practice will energize you. Sit up tall."),
                _I(10, "Take quick, powerful breaths through your nose."),
                _I(20, "Breathe in sharply!", True, _T.BREATH_IN),
                _I(21, "Breathe out!", True, _T.BREATH_OUT),
                _I(300, "Feel the energy building in your body."),
                _I(580, "Slow down and return to normal breathing."),
            ],
        ),
    ]


def _mindfulness_sessions() -> list[MeditationSession]:
    return [
        MeditationSession(
            title="Body Scan",
            description="Connect with your body through mindful awareness",
            duration=900,
            category=MeditationCategory.BODY_AWARENESS,
            difficulty=MeditationDifficulty.BEGINNER,
            background_sound=BackgroundSound.FOREST,
            instructions=[
                _I(0, "Lie down or sit comfortably. Close your eyes."),
                _I(20, "Bring awareness to your toes. Notice any sensations."),
                _I(120, "Move your attention to your feet and ankles."),
                _I(240, "Scan through your lower legs, noticing any tension."),
                _I(360, "Bring awareness to your thighs and hips.", True, _T.FOCUS),
                _I(480, "Notice your abdomen and lower back."),
                _I(600, "Scan your chest and upper back. Breathe deeply."),
                _I(720, "Bring attention to your shoulders, arms, and hands.", True, _T.RELEASE),
                _I(780, "Finally, scan your neck, face, and head."),
                _I(840, "Feel your whole body as one connected system."),
                _I(880, "Slowly open your eyes when you're ready."),
            ],
        ),
        MeditationSession(
            title="Present Moment Awareness",
            description="Simple mindfulness practice for beginners",
            duration=600,
            category=MeditationCategory.MINDFULNESS,
            difficulty=MeditationDifficulty.BEGINNER,
            background_sound=BackgroundSound.OCEAN,
            instructions=[
                _I(0, "Sit comfortably and close your eyes."),
                _I(15, "Notice the sounds around you without judgment."),
                _I(120, "Bring attention to your breath.", True, _T.FOCUS),
                _I(240, "When your mind wanders, gently return to the breath."),
                _I(360, "Notice any thoughts without getting caught in them.", True, _T.RELEASE),
                _I(480, "Simply be present in this moment."),
                _I(570, "Begin to deepen your breath."),
                _I(590, "When you're ready, open your eyes."),
            ],
        ),
    ]


def _stress_relief_sessions() -> list[MeditationSession]:
    return [
        MeditationSession(
            title="Letting Go",
            description="Release stress and tension from your day",
            duration=720,
            category=MeditationCategory.STRESS_RELIEF,
            difficulty=MeditationDifficulty.BEGINNER,
            background_sound=BackgroundSound.RAIN,
            instructions=[
                _I(0, "Find a comfortable position. Take a deep breath."),
                _I(20, "Acknowledge any stress you're feeling without judgment."),
                _I(120, "Imagine stress as a color. What color is it?", True, _T.VISUALIZE),
                _I(180, "With each exhale, imagine this color leaving your body.", True, _T.RELEASE),
                _I(360, "Feel yourself becoming lighter with each breath."),
                _I(540, "Notice how much calmer you feel now."),
                _I(690, "Carry this peace with you as you return to your day."),
            ],
        ),
        MeditationSession(
            title="Calm Mind",
            description="Quiet mental chatter and find inner peace",
            duration=900,
            category=MeditationCategory.STRESS_RELIEF,
            difficulty=MeditationDifficulty.INTERMEDIATE,
            background_sound=BackgroundSound.SINGING,
            instructions=[
                _I(0, "Close your eyes and settle into your seat."),
                _I(30, "Notice the thoughts passing through your mind."),
                _I(120, "Imagine each thought as a cloud floating by.", True, _T.VISUALIZE),
                _I(240, "Don't grab onto the clouds. Just watch them pass."),
                _I(450, "Return to the stillness between thoughts.", True, _T.FOCUS),
                _I(720, "Rest in this quiet space."),
                _I(870, "Gently return to the present moment."),
            ],
        ),
    ]


def _focus_sessions() -> list[MeditationSession]:
    return [
        MeditationSession(
            title="Mental Clarity",
            description="Sharpen your focus and concentration",
            duration=600,
            category=MeditationCategory.FOCUS,
            difficulty=MeditationDifficulty.INTERMEDIATE,
            background_sound=BackgroundSound.WHITE,
            instructions=[
                _I(0, "Sit with a straight spine. Eyes closed or softly focused."),
                _I(20, "Choose a single point of focus - your breath."),
                _I(60, "Count your breaths from 1 to 10, then start over.", True, _T.FOCUS),
                _I(180, "If you lose count, simply start again at 1."),
                _I(360, "Notice how your focus becomes sharper.", True, _T.FOCUS),
                _I(540, "This concentrated attention is available anytime."),
                _I(580, "Slowly transition back to normal awareness."),
            ],
        ),
        MeditationSession(
            title="Deep Concentration",
            description="Advanced focus training",
            duration=1200,
            category=MeditationCategory.FOCUS,
            difficulty=MeditationDifficulty.ADVANCED,
            background_sound=BackgroundSound.BELLS,
            instructions=[
                _I(0, "This is a deep concentration practice. Be patient."),
                _I(30, "Focus on a single point - the tip of your nose."),
                _I(120, "Feel the subtle sensations of breath at this point.", True, _T.FOCUS),
                _I(600, "Maintain unwavering focus. You're doing great."),
                _I(1140, "Gradually expand your awareness."),
                _I(1180, "Open your eyes slowly. Notice your mental clarity."),
            ],
        ),
    ]


def _visualization_sessions() -> list[MeditationSession]:
    return [
        MeditationSession(
            title="Peaceful Place",
            description="Create your personal sanctuary in your mind",
            duration=900,
            category=MeditationCategory.VISUALIZATION,
            difficulty=MeditationDifficulty.BEGINNER,
            background_sound=BackgroundSound.OCEAN,
            instructions=[
                _I(0, "Close your eyes and take three deep breaths."),
                _I(30, "Imagine a place where you feel completely at peace.", True, _T.VISUALIZE),
                _I(90, "What do you see? Notice the colors and shapes."),
                _I(180, "What sounds do you hear in this peaceful place?"),
                _I(300, "Feel the temperature. Is there a breeze?", True, _T.FOCUS),
                _I(480, "Notice how safe and relaxed you feel here."),
                _I(720, "Remember you can return to this place anytime."),
                _I(840, "Slowly say goodbye to this place for now."),
                _I(880, "Return to the present, feeling refreshed."),
            ],
        ),
        MeditationSession(
            title="Goal Visualization",
            description="Visualize achieving your fitness and wellness goals",
            duration=720,
            category=MeditationCategory.VISUALIZATION,
            difficulty=MeditationDifficulty.INTERMEDIATE,
            background_sound=BackgroundSound.FOREST,
            instructions=[
                _I(0, "Sit comfortably and breathe deeply."),
                _I(20, "Think of a goal you want to achieve.", True, _T.VISUALIZE),
                _I(90, "Imagine yourself having already achieved this goal."),
                _I(180, "How do you look? How do you feel?", True, _T.VISUALIZE),
                _I(300, "See yourself confident and successful."),
                _I(480, "Feel the emotions of this achievement.", True, _T.FOCUS),
                _I(660, "This future is yours to create."),
                _I(700, "Return to the present with renewed motivation."),
            ],
        ),
    ]


SESSION_BUILDERS = (
    _breathwork_sessions,
    _mindfulness_sessions,
    _stress_relief_sessions,
    _focus_sessions,
    _visualization_sessions,
)


def all_meditation_sessions() -> list[MeditationSession]:
    """Build every meditation template."""
    sessions: list[MeditationSession] = []
    for builder in SESSION_BUILDERS:
        sessions.extend(builder())
    return sessions


def generate_meditation_sessions(profile: UserProfile) -> list[MeditationSession]:
    """Build the sessions close to the profile's preferred meditation length."""
    return [
        session
        for session in all_meditation_sessions()
        if abs(session.minutes - profile.preferred_meditation_duration)
        <= DURATION_TOLERANCE_MINUTES
    ]


def find_session(sessions: list[MeditationSession], title: str) -> MeditationSession | None:
    """Find a session by case-insensitive title."""
    wanted = title.strip().lower()
    for session in sessions:
        if session.title.lower() == wanted:
            return session
    return None


_DIFFICULTY_ORDER = [
    MeditationDifficulty.BEGINNER,
    MeditationDifficulty.INTERMEDIATE,
    MeditationDifficulty.ADVANCED,
]


def adapt_session(session: MeditationSession, focus_score: float) -> MeditationSession:
    """Lengthen and harden a session after high focus, ease it after low focus."""
    adapted = copy.deepcopy(session)
    position = _DIFFICULTY_ORDER.index(session.difficulty)

    if focus_score > 0.75:
        adapted.difficulty = _DIFFICULTY_ORDER[min(position + 1, len(_DIFFICULTY_ORDER) - 1)]
        adapted.duration = int(session.duration * 1.2)
    elif focus_score < 0.4:
        adapted.duration = int(session.duration * 0.8)
        adapted.difficulty = _DIFFICULTY_ORDER[max(position - 1, 0)]

    return adapted


def instructions_in_window(
    session: MeditationSession,
    elapsed: int,
    window: int = INSTRUCTION_WINDOW_SECONDS,
) -> list[MeditationInstruction]:
    """Instructions whose timestamp falls in (elapsed - window, elapsed]."""
    return [
        ins
        for ins in session.instructions
        if elapsed - window < ins.timestamp <= elapsed
    ]

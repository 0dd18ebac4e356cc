"""Meditation session data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4

from .fields import get_bool, get_int, get_optional_float, get_optional_int, get_str


class MeditationCategory(str, Enum):
    """Meditation categories."""

    BREATHWORK = "Breathwork"
    BODY_AWARENESS = "Body Awareness"
    MINDFULNESS = "Mindfulness"
    VISUALIZATION = "Visualization"
    STRESS_RELIEF = "Stress Relief"
    SLEEP = "Sleep"
    FOCUS = "Focus"


class MeditationDifficulty(str, Enum):
    """Meditation difficulty."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class BackgroundSound(str, Enum):
    """Ambient sound played under a session."""

    NONE = "None"
    OCEAN = "Ocean Waves"
    RAIN = "Rain"
    FOREST = "Forest"
    BELLS = "Tibetan Bells"
    SINGING = "Singing Bowls"
    WHITE = "White Noise"


class InteractionType(str, Enum):
    """Prompt type of an interactive instruction."""

    BREATH_IN = "Breathe In"
    BREATH_OUT = "Breathe Out"
    HOLD = "Hold"
    FOCUS = "Focus"
    RELEASE = "Release"
    VISUALIZE = "Visualize"


def _new_id() -> str:
    return str(uuid4())


@dataclass
class MeditationInstruction:
    """A guidance line scheduled at a fixed second of a session."""

    timestamp: int  # seconds from start
    text: str
    is_interactive: bool = False
    interaction_type: InteractionType | None = None
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "text": self.text,
            "is_interactive": self.is_interactive,
            "interaction_type": self.interaction_type.value if self.interaction_type else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MeditationInstruction":
        interaction_type = None
        if data.get("interaction_type"):
            interaction_type = InteractionType(data["interaction_type"])
        return cls(
            id=get_str(data, "id"),
            timestamp=get_int(data, "timestamp"),
            text=get_str(data, "text"),
            is_interactive=get_bool(data, "is_interactive", False),
            interaction_type=interaction_type,
        )


@dataclass
class MeditationSession:
    """Meditation template, or a completed session when completed_at is set."""

    title: str
    description: str
    duration: int  # in seconds
    category: MeditationCategory
    difficulty: MeditationDifficulty
    background_sound: BackgroundSound
    instructions: list[MeditationInstruction]
    completed_at: datetime | None = None
    rating: int | None = None
    focus_score: float | None = None  # 0.0 to 1.0
    id: str = field(default_factory=_new_id)

    @property
    def formatted_duration(self) -> str:
        return f"{self.duration // 60} min"

    @property
    def minutes(self) -> int:
        return self.duration // 60

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "duration": self.duration,
            "category": self.category.value,
            "difficulty": self.difficulty.value,
            "background_sound": self.background_sound.value,
            "instructions": [ins.to_dict() for ins in self.instructions],
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "rating": self.rating,
            "focus_score": self.focus_score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MeditationSession":
        """Create from dictionary."""
        completed_at = None
        if data.get("completed_at"):
            completed_at = datetime.fromisoformat(get_str(data, "completed_at"))

        return cls(
            id=get_str(data, "id"),
            title=get_str(data, "title"),
            description=get_str(data, "description", ""),
            duration=get_int(data, "duration"),
            category=MeditationCategory(data["category"]),
            difficulty=MeditationDifficulty(data["difficulty"]),
            background_sound=BackgroundSound(data.get("background_sound", "None")),
            instructions=[
                MeditationInstruction.from_dict(ins) for ins in data.get("instructions", [])
            ],
            completed_at=completed_at,
            rating=get_optional_int(data, "rating"),
            focus_score=get_optional_float(data, "focus_score"),
        )

    def get_summary(self) -> str:
        """Generate a multi-line summary of the session."""
        lines = [
            f"{self.title} ({self.category.value}, {self.difficulty.value})",
            f"  {self.description}",
            f"  Duration: {self.formatted_duration}, sound: {self.background_sound.value}",
        ]
        for ins in self.instructions:
            minutes, seconds = divmod(ins.timestamp, 60)
            marker = f" [{ins.interaction_type.value}]" if ins.interaction_type else ""
            lines.append(f"  {minutes:02d}:{seconds:02d} {ins.text}{marker}")
        return "\n".join(lines)

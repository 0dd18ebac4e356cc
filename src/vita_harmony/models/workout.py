"""Workout data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4

from .fields import (
    get_bool,
    get_int,
    get_optional_float,
    get_optional_int,
    get_optional_str,
    get_str,
    get_str_list,
)
from .user_profile import FitnessLevel


class WorkoutCategory(str, Enum):
    """Workout categories."""

    CARDIO = "Cardio"
    STRENGTH = "Strength"
    YOGA = "Yoga"
    HIIT = "HIIT"
    STRETCHING = "Stretching"
    FULL_BODY = "Full Body"


def _new_id() -> str:
    return str(uuid4())


@dataclass
class Exercise:
    """A single timed step of a workout."""

    name: str
    description: str
    duration: int  # in seconds
    reps: int | None = None
    sets: int | None = None
    rest_time: int | None = None  # in seconds
    video_url: str | None = None
    instructions: list[str] = field(default_factory=list)
    target_muscles: list[str] = field(default_factory=list)
    is_completed: bool = False
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "duration": self.duration,
            "reps": self.reps,
            "sets": self.sets,
            "rest_time": self.rest_time,
            "video_url": self.video_url,
            "instructions": list(self.instructions),
            "target_muscles": list(self.target_muscles),
            "is_completed": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=get_str(data, "id"),
            name=get_str(data, "name"),
            description=get_str(data, "description", ""),
            duration=get_int(data, "duration"),
            reps=get_optional_int(data, "reps"),
            sets=get_optional_int(data, "sets"),
            rest_time=get_optional_int(data, "rest_time"),
            video_url=get_optional_str(data, "video_url"),
            instructions=get_str_list(data, "instructions"),
            target_muscles=get_str_list(data, "target_muscles"),
            is_completed=get_bool(data, "is_completed", False),
        )


@dataclass
class Workout:
    """Workout template, or a completed workout when completed_at is set."""

    name: str
    description: str
    duration: int  # in seconds
    difficulty: FitnessLevel
    category: WorkoutCategory
    exercises: list[Exercise]
    calories_burned: int
    completed_at: datetime | None = None
    rating: int | None = None
    performance: float | None = None  # 0.0 to 1.0
    id: str = field(default_factory=_new_id)

    @property
    def formatted_duration(self) -> str:
        """Duration as "15m" or "15m 30s"."""
        minutes, seconds = divmod(self.duration, 60)
        if seconds == 0:
            return f"{minutes}m"
        return f"{minutes}m {seconds}s"

    @property
    def total_exercise_duration(self) -> int:
        """Sum of exercise durations in seconds."""
        return sum(ex.duration for ex in self.exercises)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "duration": self.duration,
            "difficulty": self.difficulty.value,
            "category": self.category.value,
            "exercises": [ex.to_dict() for ex in self.exercises],
            "calories_burned": self.calories_burned,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "rating": self.rating,
            "performance": self.performance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from dictionary."""
        completed_at = None
        if data.get("completed_at"):
            completed_at = datetime.fromisoformat(get_str(data, "completed_at"))

        return cls(
            id=get_str(data, "id"),
            name=get_str(data, "name"),
            description=get_str(data, "description", ""),
            duration=get_int(data, "duration"),
            difficulty=FitnessLevel(data["difficulty"]),
            category=WorkoutCategory(data["category"]),
            exercises=[Exercise.from_dict(ex) for ex in data.get("exercises", [])],
            calories_burned=get_int(data, "calories_burned", 0),
            completed_at=completed_at,
            rating=get_optional_int(data, "rating"),
            performance=get_optional_float(data, "performance"),
        )

    def get_summary(self) -> str:
        """Generate a multi-line summary of the workout."""
        lines = [
            f"{self.name} ({self.category.value}, {self.difficulty.value})",
            f"  {self.description}",
            f"  Duration: {self.formatted_duration}, ~{self.calories_burned} kcal",
        ]
        for i, ex in enumerate(self.exercises, 1):
            detail = f"{ex.duration}s"
            if ex.sets and ex.reps:
                detail += f", {ex.sets}x{ex.reps}"
            elif ex.reps:
                detail += f", {ex.reps} reps"
            elif ex.sets:
                detail += f", {ex.sets} sets"
            if ex.rest_time:
                detail += f", rest {ex.rest_time}s"
            lines.append(f"  {i}. {ex.name} ({detail})")
        return "\n".join(lines)

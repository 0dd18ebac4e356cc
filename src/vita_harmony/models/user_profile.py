"""User profile data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4

from .fields import get_bool, get_int, get_optional_float, get_optional_int, get_str


class FitnessGoal(str, Enum):
    """Primary fitness goals."""

    WEIGHT_LOSS = "Weight Loss"
    MUSCLE_GAIN = "Muscle Gain"
    ENDURANCE = "Endurance"
    FLEXIBILITY = "Flexibility"
    GENERAL = "General Fitness"
    STRESS_RELIEF = "Stress Relief"


class FitnessLevel(str, Enum):
    """Fitness level, also used as workout difficulty."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


def _new_id() -> str:
    return str(uuid4())


@dataclass
class UserProfile:
    """Complete user profile with activity counters."""

    name: str = "Guest"
    email: str = ""
    fitness_goal: FitnessGoal = FitnessGoal.GENERAL
    fitness_level: FitnessLevel = FitnessLevel.BEGINNER
    age: int | None = None
    weight: float | None = None  # in kg
    height: float | None = None  # in cm
    is_guest: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    total_workouts: int = 0
    total_meditation_minutes: int = 0
    streak: int = 0
    preferred_workout_duration: int = 30  # minutes
    preferred_meditation_duration: int = 10  # minutes
    id: str = field(default_factory=_new_id)

    def bmi(self) -> float | None:
        """Body mass index, or None without weight and height."""
        if self.weight is None or self.height is None or self.height <= 0:
            return None
        height_m = self.height / 100.0
        return self.weight / (height_m * height_m)

    def bmi_category(self) -> str:
        """Get the BMI category label."""
        bmi = self.bmi()
        if bmi is None:
            return "N/A"
        if bmi < 18.5:
            return "Underweight"
        if bmi < 25:
            return "Normal"
        if bmi < 30:
            return "Overweight"
        return "Obese"

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "fitness_goal": self.fitness_goal.value,
            "fitness_level": self.fitness_level.value,
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "is_guest": self.is_guest,
            "created_at": self.created_at.isoformat(),
            "total_workouts": self.total_workouts,
            "total_meditation_minutes": self.total_meditation_minutes,
            "streak": self.streak,
            "preferred_workout_duration": self.preferred_workout_duration,
            "preferred_meditation_duration": self.preferred_meditation_duration,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from dictionary."""
        return cls(
            id=get_str(data, "id"),
            name=get_str(data, "name", "Guest"),
            email=get_str(data, "email", ""),
            fitness_goal=FitnessGoal(data.get("fitness_goal", FitnessGoal.GENERAL.value)),
            fitness_level=FitnessLevel(data.get("fitness_level", FitnessLevel.BEGINNER.value)),
            age=get_optional_int(data, "age"),
            weight=get_optional_float(data, "weight"),
            height=get_optional_float(data, "height"),
            is_guest=get_bool(data, "is_guest", False),
            created_at=datetime.fromisoformat(get_str(data, "created_at")),
            total_workouts=get_int(data, "total_workouts", 0),
            total_meditation_minutes=get_int(data, "total_meditation_minutes", 0),
            streak=get_int(data, "streak", 0),
            preferred_workout_duration=get_int(data, "preferred_workout_duration", 30),
            preferred_meditation_duration=get_int(data, "preferred_meditation_duration", 10),
        )

    def get_summary(self) -> str:
        """Generate a short human-readable summary."""
        summary = f"User: {self.name}"
        if self.is_guest:
            summary += " (guest)"
        summary += "\n"
        if self.email:
            summary += f"Email: {self.email}\n"
        summary += f"Goal: {self.fitness_goal.value}\n"
        summary += f"Level: {self.fitness_level.value}\n"
        summary += (
            f"Preferences: {self.preferred_workout_duration} min workouts, "
            f"{self.preferred_meditation_duration} min meditations\n"
        )

        bmi = self.bmi()
        if bmi is not None:
            summary += f"BMI: {bmi:.1f} ({self.bmi_category()})\n"

        summary += (
            f"Totals: {self.total_workouts} workouts, "
            f"{self.total_meditation_minutes} meditation minutes, "
            f"streak {self.streak} day(s)\n"
        )
        return summary

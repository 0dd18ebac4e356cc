"""Active session state and player events."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .meditation import MeditationSession
from .workout import Workout


class PlayerState(str, Enum):
    """Session player state."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class EventKind(str, Enum):
    """Kinds of events published by a session player."""

    STARTED = "started"
    TICK = "tick"
    STEP_CHANGED = "step_changed"
    INSTRUCTION = "instruction"
    COACH_MESSAGE = "coach_message"
    PAUSED = "paused"
    RESUMED = "resumed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESET = "reset"


@dataclass
class PlayerEvent:
    """An event from a session player."""

    kind: EventKind
    message: str = ""
    data: dict | None = None
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ActiveWorkout:
    """A workout being played.

    ``workout`` is a private copy whose exercises carry the completion flags
    for this run.
    """

    workout: Workout
    start_time: datetime
    end_time: datetime | None = None
    current_index: int = 0
    is_paused: bool = False
    performance: float = 0.75

    @property
    def step_count(self) -> int:
        return len(self.workout.exercises)

    @property
    def completion_flags(self) -> list[bool]:
        return [ex.is_completed for ex in self.workout.exercises]


@dataclass
class ActiveMeditation:
    """A meditation session being played."""

    session: MeditationSession
    start_time: datetime
    end_time: datetime | None = None
    current_index: int = 0  # next instruction not yet consumed
    is_paused: bool = False
    interaction_responses: list[bool] = field(default_factory=list)
    delivered: list[int] = field(default_factory=list)
    missed: list[int] = field(default_factory=list)

    @property
    def step_count(self) -> int:
        return len(self.session.instructions)

    @property
    def focus_score(self) -> float:
        """Fraction of positive interaction responses, 0 when none."""
        if not self.interaction_responses:
            return 0.0
        positive = sum(1 for r in self.interaction_responses if r)
        return positive / len(self.interaction_responses)

"""Session players for workouts and meditations.

A player is a synchronous state machine driven by ``tick()``, one call per
second of session time. ``SessionRunner`` owns the clock; tests can drive a
player directly.
"""

import copy
import logging
import random
from collections.abc import Callable
from datetime import datetime

from ..catalog.meditations import INSTRUCTION_WINDOW_SECONDS
from ..catalog.workouts import calculate_calories
from ..errors import PlayerStateError
from ..models.meditation import MeditationSession
from ..models.session import (
    ActiveMeditation,
    ActiveWorkout,
    EventKind,
    PlayerEvent,
    PlayerState,
)
from ..models.workout import Exercise, Workout
from . import feedback

logger = logging.getLogger(__name__)

Subscriber = Callable[[PlayerEvent], None]

COACH_REFRESH_SECONDS = 15
GUIDANCE_INTERVAL_SECONDS = 60
INITIAL_PERFORMANCE = 0.75
SKIP_PENALTY = 0.1
PERFORMANCE_STEP = 0.05
MEDITATION_START_MESSAGE = "Beginning your meditation session..."


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class _Player:
    """State, clock and event plumbing shared by both players."""

    kind = "session"

    def __init__(self, rng: random.Random | None = None):
        self.state = PlayerState.IDLE
        self.elapsed = 0
        self.progress = 0.0
        self.coach_message = ""
        self.history: list = []
        self.rng = rng
        self._subscribers: list[Subscriber] = []

    @property
    def is_active(self) -> bool:
        return self.state in (PlayerState.RUNNING, PlayerState.PAUSED)

    @property
    def total_duration(self) -> int:
        raise NotImplementedError

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for player events.

        Returns:
            A function that removes the callback again
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _emit(self, kind: EventKind, message: str = "", **data) -> None:
        event = PlayerEvent(kind=kind, message=message, data=data or None)
        for callback in list(self._subscribers):
            callback(event)

    def _say(self, kind: EventKind, message: str, **data) -> None:
        self.coach_message = message
        self._emit(kind, message, **data)

    def _require(self, *states: PlayerState, action: str) -> None:
        if self.state not in states:
            raise PlayerStateError(f"Cannot {action} a {self.kind} while {self.state.value}")

    def _begin(self) -> None:
        self.elapsed = 0
        self.progress = 1.0 if self.total_duration == 0 else 0.0
        self.state = PlayerState.RUNNING

    def _update_progress(self) -> None:
        total = self.total_duration
        self.progress = 1.0 if total <= 0 else min(1.0, self.elapsed / total)

    def pause(self) -> None:
        self._require(PlayerState.RUNNING, action="pause")
        self.state = PlayerState.PAUSED
        self._active.is_paused = True
        self._emit(EventKind.PAUSED)

    def resume(self) -> None:
        self._require(PlayerState.PAUSED, action="resume")
        self.state = PlayerState.RUNNING
        self._active.is_paused = False
        self._emit(EventKind.RESUMED)

    def tick(self) -> None:
        """Advance session time by one second. Does nothing unless running."""
        if self.state != PlayerState.RUNNING:
            return
        self.elapsed += 1
        self._update_progress()
        self._emit(EventKind.TICK, elapsed=self.elapsed, progress=self.progress)
        self._advance()

    def cancel(self) -> None:
        """Abandon the session without recording anything."""
        self._require(PlayerState.RUNNING, PlayerState.PAUSED, action="cancel")
        logger.info("%s cancelled after %ss", self.kind.capitalize(), self.elapsed)
        self._clear()
        self._emit(EventKind.CANCELLED)

    def reset(self) -> None:
        """Return a completed player to idle."""
        if self.state == PlayerState.IDLE:
            return
        self._require(PlayerState.COMPLETED, action="reset")
        self._clear()
        self._emit(EventKind.RESET)

    def _clear(self) -> None:
        self._active = None
        self.state = PlayerState.IDLE
        self.elapsed = 0
        self.progress = 0.0
        self.coach_message = ""

    def _finish(self, item, message: str, **data) -> None:
        self._active.end_time = datetime.now()
        self.history.append(item)
        self.progress = 1.0
        self.state = PlayerState.COMPLETED
        self._say(EventKind.COMPLETED, message, item=item, **data)

    def _advance(self) -> None:
        raise NotImplementedError


class WorkoutPlayer(_Player):
    """Plays a workout exercise by exercise on a cumulative schedule.

    Exercise ``i`` ends once the session has run for the summed duration of
    exercises ``0..i``, whether or not earlier exercises were skipped.
    """

    kind = "workout"

    def __init__(self, weight_kg: float | None = None, rng: random.Random | None = None):
        super().__init__(rng)
        self.weight_kg = weight_kg
        self._active: ActiveWorkout | None = None

    @property
    def active(self) -> ActiveWorkout | None:
        return self._active

    @property
    def current_index(self) -> int:
        return self._active.current_index if self._active else 0

    @property
    def performance(self) -> float:
        return self._active.performance if self._active else INITIAL_PERFORMANCE

    @property
    def total_duration(self) -> int:
        return self._active.workout.total_exercise_duration if self._active else 0

    @property
    def current_exercise(self) -> Exercise | None:
        if self._active is None or self.current_index >= self._active.step_count:
            return None
        return self._active.workout.exercises[self.current_index]

    def start(self, workout: Workout) -> ActiveWorkout:
        """Start a fresh run of a workout."""
        if self.is_active:
            raise PlayerStateError("A workout is already in progress")

        run = copy.deepcopy(workout)
        for exercise in run.exercises:
            exercise.is_completed = False
        self._active = ActiveWorkout(workout=run, start_time=datetime.now())
        self._begin()

        logger.info("Started workout %r (%d exercises)", run.name, len(run.exercises))
        self._emit(EventKind.STARTED, run.name, step_count=len(run.exercises))
        self._encourage()
        return self._active

    def _scheduled_end(self, index: int) -> int:
        exercises = self._active.workout.exercises
        return sum(ex.duration for ex in exercises[: index + 1])

    def _encourage(self) -> None:
        exercise = self.current_exercise
        if exercise is None:
            return
        message = feedback.workout_encouragement(self.progress, exercise.name, self.rng)
        self._say(EventKind.COACH_MESSAGE, message)

    def _advance(self) -> None:
        active = self._active
        changed = False
        while (
            active.current_index < active.step_count
            and self._scheduled_end(active.current_index) <= self.elapsed
        ):
            active.workout.exercises[active.current_index].is_completed = True
            active.current_index += 1
            changed = True

        if active.current_index >= active.step_count:
            self._complete()
        elif changed:
            self._step_changed()
        elif self.elapsed % COACH_REFRESH_SECONDS == 0:
            self._encourage()

    def _step_changed(self) -> None:
        exercise = self.current_exercise
        self._emit(
            EventKind.STEP_CHANGED,
            exercise.name,
            index=self.current_index,
            step_count=self._active.step_count,
        )
        if exercise.rest_time:
            self._say(EventKind.COACH_MESSAGE, feedback.rest_message(self.rng))
        else:
            self._encourage()

    def _step_forward(self, completed: bool) -> None:
        active = self._active
        if completed:
            active.workout.exercises[active.current_index].is_completed = True
        active.current_index += 1
        if active.current_index >= active.step_count:
            self._complete()
        else:
            self._step_changed()

    def complete_step(self) -> None:
        """Mark the current exercise done and move on."""
        self._require(PlayerState.RUNNING, PlayerState.PAUSED, action="complete a step of")
        self._step_forward(completed=True)

    def skip(self) -> None:
        """Move to the next exercise, costing some performance."""
        self._require(PlayerState.RUNNING, PlayerState.PAUSED, action="skip in")
        self._active.performance = _clamp(self._active.performance - SKIP_PENALTY)
        self._step_forward(completed=False)

    def record_good_performance(self) -> None:
        self._require(PlayerState.RUNNING, PlayerState.PAUSED, action="rate")
        self._active.performance = _clamp(self._active.performance + PERFORMANCE_STEP)

    def record_poor_performance(self) -> None:
        self._require(PlayerState.RUNNING, PlayerState.PAUSED, action="rate")
        self._active.performance = _clamp(self._active.performance - PERFORMANCE_STEP)

    def _complete(self) -> None:
        active = self._active
        done = active.workout
        done.completed_at = datetime.now()
        done.performance = active.performance
        done.calories_burned = calculate_calories(
            self.elapsed, self.weight_kg, active.performance
        )
        logger.info(
            "Completed workout %r: performance %.2f, %d kcal",
            done.name,
            active.performance,
            done.calories_burned,
        )
        self._finish(
            done,
            feedback.workout_completion_message(active.performance),
            performance=active.performance,
            summary=feedback.analyze_workout_performance(
                active.completion_flags, active.performance
            ),
        )


class MeditationPlayer(_Player):
    """Plays a meditation session, delivering each instruction at most once."""

    kind = "meditation"

    def __init__(
        self,
        rng: random.Random | None = None,
        window: int = INSTRUCTION_WINDOW_SECONDS,
    ):
        super().__init__(rng)
        self.window = window
        self._active: ActiveMeditation | None = None

    @property
    def active(self) -> ActiveMeditation | None:
        return self._active

    @property
    def total_duration(self) -> int:
        return self._active.session.duration if self._active else 0

    @property
    def focus_score(self) -> float:
        return self._active.focus_score if self._active else 0.0

    def start(self, session: MeditationSession) -> ActiveMeditation:
        """Start a fresh run of a meditation session."""
        if self.is_active:
            raise PlayerStateError("A meditation is already in progress")

        run = copy.deepcopy(session)
        run.instructions.sort(key=lambda ins: ins.timestamp)
        self._active = ActiveMeditation(session=run, start_time=datetime.now())
        self._begin()

        logger.info("Started meditation %r (%ss)", run.title, run.duration)
        self._emit(EventKind.STARTED, run.title, step_count=len(run.instructions))
        self._say(EventKind.COACH_MESSAGE, MEDITATION_START_MESSAGE)
        return self._active

    def record_interaction(self, successful: bool) -> None:
        """Log the user's response to an interactive instruction."""
        self._require(PlayerState.RUNNING, PlayerState.PAUSED, action="respond in")
        self._active.interaction_responses.append(successful)

    def _advance(self) -> None:
        active = self._active
        instructions = active.session.instructions

        while (
            active.current_index < len(instructions)
            and instructions[active.current_index].timestamp <= self.elapsed
        ):
            index = active.current_index
            instruction = instructions[index]
            if instruction.timestamp > self.elapsed - self.window:
                active.delivered.append(index)
                self._say(
                    EventKind.INSTRUCTION,
                    instruction.text,
                    index=index,
                    interactive=instruction.is_interactive,
                    interaction_type=(
                        instruction.interaction_type.value
                        if instruction.interaction_type
                        else None
                    ),
                )
            else:
                active.missed.append(index)
                logger.debug("Instruction %d at %ss missed", index, instruction.timestamp)
            active.current_index += 1

        if self.elapsed % GUIDANCE_INTERVAL_SECONDS == 0:
            guidance = feedback.meditation_guidance(active.session.category, self.elapsed)
            if guidance:
                self._say(EventKind.COACH_MESSAGE, guidance)

        if self.elapsed >= active.session.duration:
            self._complete()

    def _complete(self) -> None:
        active = self._active
        score = active.focus_score
        done = active.session
        done.completed_at = datetime.now()
        done.focus_score = score
        logger.info("Completed meditation %r: focus %.2f", done.title, score)
        self._finish(
            done,
            feedback.meditation_completion_message(score),
            focus_score=score,
            summary=feedback.analyze_meditation_performance(score, self.elapsed),
        )

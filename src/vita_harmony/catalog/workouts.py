"""Workout templates and workout adaptation."""

import copy

from ..models.user_profile import FitnessGoal, FitnessLevel, UserProfile
from ..models.workout import Exercise, Workout, WorkoutCategory

DEFAULT_WEIGHT_KG = 70.0

LEVEL_DURATION = {
    FitnessLevel.BEGINNER: 900,
    FitnessLevel.INTERMEDIATE: 1800,
    FitnessLevel.ADVANCED: 2700,
}

LEVEL_MULTIPLIER = {
    FitnessLevel.BEGINNER: 1,
    FitnessLevel.INTERMEDIATE: 2,
    FitnessLevel.ADVANCED: 3,
}


def _weight_loss_workouts(level: FitnessLevel) -> list[Workout]:
    duration = LEVEL_DURATION[level]
    m = LEVEL_MULTIPLIER[level]

    return [
        Workout(
            name="HIIT Fat Burner",
            description="High-intensity interval training to maximize calorie burn",
            duration=duration,
            difficulty=level,
            category=WorkoutCategory.HIIT,
            exercises=[
                Exercise(
                    name="Jumping Jacks",
                    description="Full body cardio warm-up",
                    duration=30 * m,
                    instructions=[
                        "Stand with feet together",
                        "Jump while spreading legs and raising arms",
                        "Return to start position",
                    ],
                    target_muscles=["Full Body"],
                ),
                Exercise(
                    name="Burpees",
                    description="Ultimate fat burning exercise",
                    duration=30 * m,
                    reps=10,
                    instructions=["Start standing", "Drop to plank", "Push up", "Jump up"],
                    target_muscles=["Full Body"],
                ),
                Exercise(
                    name="Mountain Climbers",
                    description="Core and cardio combo",
                    duration=30 * m,
                    instructions=["Start in plank position", "Alternate bringing knees to chest"],
                    target_muscles=["Core", "Legs"],
                ),
                Exercise(
                    name="High Knees",
                    description="Cardio intensity builder",
                    duration=30 * m,
                    instructions=["Run in place", "Bring knees to chest level"],
                    target_muscles=["Legs", "Cardio"],
                ),
                Exercise(
                    name="Rest",
                    description="Active recovery",
                    duration=30,
                    instructions=["Walk in place", "Deep breathing"],
                ),
            ],
            calories_burned=300 * m,
        ),
        Workout(
            name="Cardio Blast",
            description="Steady-state cardio for fat burning",
            duration=duration + 300,
            difficulty=level,
            category=WorkoutCategory.CARDIO,
            exercises=[
                Exercise(
                    name="Running in Place",
                    description="Cardio warm-up",
                    duration=60 * m,
                    instructions=["Start with light jog", "Increase pace gradually"],
                    target_muscles=["Legs"],
                ),
                Exercise(
                    name="Jump Rope (or simulated)",
                    description="Cardio endurance",
                    duration=120 * m,
                    instructions=["Jump with both feet", "Maintain steady rhythm"],
                    target_muscles=["Legs", "Cardio"],
                ),
                Exercise(
                    name="Butt Kicks",
                    description="Cardio and leg workout",
                    duration=60 * m,
                    instructions=["Run in place", "Kick heels to glutes"],
                    target_muscles=["Legs"],
                ),
                Exercise(
                    name="Skaters",
                    description="Lateral cardio movement",
                    duration=60 * m,
                    instructions=["Leap side to side", "Land on one foot"],
                    target_muscles=["Legs", "Core"],
                ),
            ],
            calories_burned=250 * m,
        ),
    ]


def _muscle_gain_workouts(level: FitnessLevel) -> list[Workout]:
    m = LEVEL_MULTIPLIER[level]

    return [
        Workout(
            name="Upper Body Strength",
            description="Build muscle in chest, arms, and shoulders",
            duration=1800,
            difficulty=level,
            category=WorkoutCategory.STRENGTH,
            exercises=[
                Exercise(
                    name="Push-ups",
                    description="Classic chest builder",
                    duration=60,
                    reps=15 * m,
                    sets=3,
                    rest_time=60,
                    instructions=["Start in plank", "Lower chest to ground", "Push back up"],
                    target_muscles=["Chest", "Triceps"],
                ),
                Exercise(
                    name="Diamond Push-ups",
                    description="Tricep focused",
                    duration=60,
                    reps=10 * m,
                    sets=3,
                    rest_time=60,
                    instructions=["Form diamond with hands", "Perform push-up"],
                    target_muscles=["Triceps", "Chest"],
                ),
                Exercise(
                    name="Pike Push-ups",
                    description="Shoulder builder",
                    duration=60,
                    reps=12 * m,
                    sets=3,
                    rest_time=60,
                    instructions=["Form inverted V", "Lower head to ground"],
                    target_muscles=["Shoulders"],
                ),
                Exercise(
                    name="Tricep Dips",
                    description="Arm sculptor",
                    duration=60,
                    reps=15 * m,
                    sets=3,
                    rest_time=60,
                    instructions=["Use chair or bench", "Lower body down", "Push back up"],
                    target_muscles=["Triceps"],
                ),
            ],
            calories_burned=200 * m,
        ),
        Workout(
            name="Lower Body Power",
            description="Leg and glute muscle building",
            duration=1800,
            difficulty=level,
            category=WorkoutCategory.STRENGTH,
            exercises=[
                Exercise(
                    name="Squats",
                    description="Leg power builder",
                    duration=60,
                    reps=20 * m,
                    sets=4,
                    rest_time=60,
                    instructions=[
                        "Feet shoulder-width",
                        "Lower hips back and down",
                        "Push through heels",
                    ],
                    target_muscles=["Quads", "Glutes"],
                ),
                Exercise(
                    name="Lunges",
                    description="Single leg strength",
                    duration=60,
                    reps=15 * m,
                    sets=3,
                    rest_time=60,
                    instructions=["Step forward", "Lower back knee", "Push back to start"],
                    target_muscles=["Quads", "Glutes"],
                ),
                Exercise(
                    name="Glute Bridges",
                    description="Glute activation",
                    duration=60,
                    reps=20 * m,
                    sets=3,
                    rest_time=60,
                    instructions=["Lie on back", "Lift hips up", "Squeeze glutes"],
                    target_muscles=["Glutes", "Hamstrings"],
                ),
                Exercise(
                    name="Calf Raises",
                    description="Lower leg strength",
                    duration=60,
                    reps=25 * m,
                    sets=3,
                    rest_time=45,
                    instructions=["Stand on balls of feet", "Raise heels up", "Lower slowly"],
                    target_muscles=["Calves"],
                ),
            ],
            calories_burned=220 * m,
        ),
    ]


def _endurance_workouts(level: FitnessLevel) -> list[Workout]:
    m = LEVEL_MULTIPLIER[level]

    return [
        Workout(
            name="Stamina Builder",
            description="Increase cardiovascular endurance",
            duration=2400,
            difficulty=level,
            category=WorkoutCategory.CARDIO,
            exercises=[
                Exercise(
                    name="Warm-up Jog",
                    description="Prepare the body",
                    duration=300,
                    instructions=["Start with light pace", "Gradually increase intensity"],
                    target_muscles=["Cardio"],
                ),
                Exercise(
                    name="Steady Run",
                    description="Build endurance",
                    duration=900 * m,
                    instructions=["Maintain consistent pace", "Focus on breathing"],
                    target_muscles=["Legs", "Cardio"],
                ),
                Exercise(
                    name="Sprint Intervals",
                    description="Push your limits",
                    duration=60 * m,
                    sets=5,
                    rest_time=90,
                    instructions=["Sprint at max effort", "Rest between intervals"],
                    target_muscles=["Legs", "Cardio"],
                ),
                Exercise(
                    name="Cool Down",
                    description="Recovery",
                    duration=300,
                    instructions=["Slow to walking pace", "Deep breathing"],
                ),
            ],
            calories_burned=400 * m,
        ),
    ]


def _flexibility_workouts(level: FitnessLevel) -> list[Workout]:
    return [
        Workout(
            name="Full Body Stretch",
            description="Improve flexibility and mobility",
            duration=1200,
            difficulty=level,
            category=WorkoutCategory.STRETCHING,
            exercises=[
                Exercise(
                    name="Neck Rolls",
                    description="Neck mobility",
                    duration=60,
                    instructions=["Slowly roll neck in circles", "Reverse direction"],
                    target_muscles=["Neck"],
                ),
                Exercise(
                    name="Shoulder Stretch",
                    description="Upper body flexibility",
                    duration=90,
                    instructions=["Pull arm across body", "Hold for 30 seconds each side"],
                    target_muscles=["Shoulders"],
                ),
                Exercise(
                    name="Forward Fold",
                    description="Hamstring stretch",
                    duration=120,
                    instructions=["Stand and bend forward", "Reach for toes", "Hold position"],
                    target_muscles=["Hamstrings", "Back"],
                ),
                Exercise(
                    name="Hip Flexor Stretch",
                    description="Hip mobility",
                    duration=120,
                    instructions=["Lunge position", "Push hips forward", "Hold each side"],
                    target_muscles=["Hip Flexors"],
                ),
                Exercise(
                    name="Quad Stretch",
                    description="Leg flexibility",
                    duration=90,
                    instructions=["Stand on one leg", "Pull foot to glutes", "Hold each side"],
                    target_muscles=["Quads"],
                ),
                Exercise(
                    name="Butterfly Stretch",
                    description="Inner thigh stretch",
                    duration=120,
                    instructions=["Sit with soles together", "Press knees down", "Lean forward"],
                    target_muscles=["Inner Thighs"],
                ),
            ],
            calories_burned=80,
        ),
        Workout(
            name="Yoga Flow",
            description="Dynamic stretching and flexibility",
            duration=1800,
            difficulty=level,
            category=WorkoutCategory.YOGA,
            exercises=[
                Exercise(
                    name="Cat-Cow Stretch",
                    description="Spine mobility",
                    duration=120,
                    instructions=["Start on all fours", "Arch and round back", "Flow with breath"],
                    target_muscles=["Spine", "Core"],
                ),
                Exercise(
                    name="Downward Dog",
                    description="Full body stretch",
                    duration=180,
                    instructions=["Form inverted V", "Press heels down", "Relax shoulders"],
                    target_muscles=["Full Body"],
                ),
                Exercise(
                    name="Warrior Pose",
                    description="Strength and flexibility",
                    duration=120,
                    instructions=["Lunge with arms extended", "Hold each side"],
                    target_muscles=["Legs", "Core"],
                ),
                Exercise(
                    name="Child's Pose",
                    description="Relaxation stretch",
                    duration=180,
                    instructions=[
                        "Sit on heels",
                        "Extend arms forward",
                        "Rest forehead on ground",
                    ],
                    target_muscles=["Back", "Shoulders"],
                ),
            ],
            calories_burned=100,
        ),
    ]


def _general_workouts(level: FitnessLevel) -> list[Workout]:
    m = LEVEL_MULTIPLIER[level]

    return [
        Workout(
            name="Full Body Workout",
            description="Balanced routine for overall fitness",
            duration=1800,
            difficulty=level,
            category=WorkoutCategory.FULL_BODY,
            exercises=[
                Exercise(
                    name="Jumping Jacks",
                    description="Warm-up",
                    duration=60,
                    instructions=["Full body movement", "Increase heart rate"],
                    target_muscles=["Full Body"],
                ),
                Exercise(
                    name="Push-ups",
                    description="Upper body",
                    duration=60,
                    reps=12 * m,
                    sets=3,
                    rest_time=45,
                    instructions=["Standard push-up form"],
                    target_muscles=["Chest", "Arms"],
                ),
                Exercise(
                    name="Squats",
                    description="Lower body",
                    duration=60,
                    reps=15 * m,
                    sets=3,
                    rest_time=45,
                    instructions=["Proper squat form"],
                    target_muscles=["Legs"],
                ),
                Exercise(
                    name="Plank",
                    description="Core strength",
                    duration=45 * m,
                    sets=3,
                    rest_time=60,
                    instructions=["Hold plank position", "Keep body straight"],
                    target_muscles=["Core"],
                ),
                Exercise(
                    name="Burpees",
                    description="Full body cardio",
                    duration=60,
                    reps=10 * m,
                    sets=2,
                    rest_time=60,
                    instructions=["Complete burpee cycle"],
                    target_muscles=["Full Body"],
                ),
            ],
            calories_burned=250 * m,
        ),
    ]


def _stress_relief_workouts(level: FitnessLevel) -> list[Workout]:
    return [
        Workout(
            name="Relaxing Yoga",
            description="Gentle movements for stress relief",
            duration=1800,
            difficulty=level,
            category=WorkoutCategory.YOGA,
            exercises=[
                Exercise(
                    name="Deep Breathing",
                    description="Calm the mind",
                    duration=180,
                    instructions=["Inhale deeply for 4 counts", "Hold for 4", "Exhale for 4"],
                ),
                Exercise(
                    name="Gentle Stretching",
                    description="Release tension",
                    duration=300,
                    instructions=["Slow, gentle movements", "Focus on breathing"],
                    target_muscles=["Full Body"],
                ),
                Exercise(
                    name="Restorative Poses",
                    description="Deep relaxation",
                    duration=600,
                    instructions=["Hold comfortable positions", "Let go of stress"],
                    target_muscles=["Full Body"],
                ),
                Exercise(
                    name="Meditation",
                    description="Mental relaxation",
                    duration=300,
                    instructions=["Sit comfortably", "Focus on breath", "Clear your mind"],
                ),
            ],
            calories_burned=100,
        ),
    ]


WORKOUT_BUILDERS = {
    FitnessGoal.WEIGHT_LOSS: _weight_loss_workouts,
    FitnessGoal.MUSCLE_GAIN: _muscle_gain_workouts,
    FitnessGoal.ENDURANCE: _endurance_workouts,
    FitnessGoal.FLEXIBILITY: _flexibility_workouts,
    FitnessGoal.GENERAL: _general_workouts,
    FitnessGoal.STRESS_RELIEF: _stress_relief_workouts,
}


def generate_workouts(profile: UserProfile) -> list[Workout]:
    """Build the workouts matching the profile's goal and level.

    Every call returns new objects, so callers may mutate them freely.
    """
    return WORKOUT_BUILDERS[profile.fitness_goal](profile.fitness_level)


def all_workouts(level: FitnessLevel = FitnessLevel.BEGINNER) -> list[Workout]:
    """Build every workout template at the given level."""
    workouts: list[Workout] = []
    for builder in WORKOUT_BUILDERS.values():
        workouts.extend(builder(level))
    return workouts


def find_workout(workouts: list[Workout], name: str) -> Workout | None:
    """Find a workout by case-insensitive name."""
    wanted = name.strip().lower()
    for workout in workouts:
        if workout.name.lower() == wanted:
            return workout
    return None


def adapt_workout(workout: Workout, performance: float) -> Workout:
    """Scale a workout up or down from the last session's performance.

    Args:
        workout: Template to adapt (left untouched)
        performance: Last performance score in [0, 1]

    Returns:
        An adapted copy of the workout
    """
    adapted = copy.deepcopy(workout)

    if performance > 0.8:
        for exercise in adapted.exercises:
            if exercise.reps is not None:
                exercise.reps = int(exercise.reps * 1.2)
            if exercise.sets is not None:
                exercise.sets = min(exercise.sets + 1, 5)
            exercise.duration = int(exercise.duration * 1.1)
    elif performance < 0.5:
        for exercise in adapted.exercises:
            if exercise.reps is not None:
                exercise.reps = int(exercise.reps * 0.8)
            exercise.duration = int(exercise.duration * 0.9)

    return adapted


def calculate_calories(
    duration_seconds: float, weight_kg: float | None, intensity: float
) -> int:
    """Estimate calories burned from a MET value scaled by intensity.

    MET ranges from 3 (intensity 0) to 11 (intensity 1).
    """
    weight = weight_kg if weight_kg is not None else DEFAULT_WEIGHT_KG
    hours = duration_seconds / 3600.0
    met = 3.0 + intensity * 8.0
    return int(met * weight * hours)

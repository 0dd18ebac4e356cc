"""vita-harmony: workouts and guided meditation with a live coach."""

__version__ = "0.1.0"

"""CLI commands for vita-harmony."""

from .catalog import meditations, workouts
from .gate import gate
from .history import history
from .init import init
from .onboard import onboard
from .play import play
from .profile import profile
from .serve import serve
from .settings import settings

__all__ = [
    "gate",
    "history",
    "init",
    "meditations",
    "onboard",
    "play",
    "profile",
    "serve",
    "settings",
    "workouts",
]

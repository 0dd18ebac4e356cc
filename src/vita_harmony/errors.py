"""Exception types for vita-harmony."""


class VitaHarmonyError(Exception):
    """Base class for vita-harmony errors."""


class PlayerStateError(VitaHarmonyError):
    """A session player control was called in a state that does not allow it."""

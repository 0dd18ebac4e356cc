"""App preference toggles."""

from dataclasses import dataclass

from .fields import get_bool, get_str


@dataclass
class AppSettings:
    """User-facing app settings."""

    notifications_enabled: bool = True
    reminder_time: str = "09:00"  # HH:MM, local time
    sound_enabled: bool = True
    haptics_enabled: bool = True
    dark_mode_enabled: bool = True

    TOGGLES = ("notifications", "sound", "haptics", "dark_mode")

    def toggle(self, name: str) -> bool:
        """Flip a toggle by short name and return its new value."""
        if name not in self.TOGGLES:
            raise ValueError(f"Unknown setting: {name}")
        attr = f"{name}_enabled"
        value = not getattr(self, attr)
        setattr(self, attr, value)
        return value

    def to_dict(self) -> dict:
        return {
            "notifications_enabled": self.notifications_enabled,
            "reminder_time": self.reminder_time,
            "sound_enabled": self.sound_enabled,
            "haptics_enabled": self.haptics_enabled,
            "dark_mode_enabled": self.dark_mode_enabled,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        return cls(
            notifications_enabled=get_bool(data, "notifications_enabled", True),
            reminder_time=get_str(data, "reminder_time", "09:00"),
            sound_enabled=get_bool(data, "sound_enabled", True),
            haptics_enabled=get_bool(data, "haptics_enabled", True),
            dark_mode_enabled=get_bool(data, "dark_mode_enabled", True),
        )

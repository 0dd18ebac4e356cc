"""Application settings, read from VITA_* environment variables or .env."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VITA_", env_file=".env", extra="ignore")

    data_dir: Path = Path("data")

    # Remote gate check; an empty URL skips the request and stays native
    gate_url: str = ""
    gate_timeout: float = 5.0
    gate_user_agent: str = "VitaHarmony/1.0 (python)"
    gate_accept_language: str = "en-US,en;q=0.9"

    # Calendar day policy for streaks.
    # Examples: "Europe/London", "America/New_York", or "local" for the system tz.
    timezone: str = "local"

    # Session playback
    tick_interval: float = 1.0
    workout_reset_delay: float = 2.0
    meditation_reset_delay: float = 3.0

    log_level: str = "INFO"

    @field_validator("gate_url", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        if v in (None, "null", "None"):
            return ""
        return v

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()

    def get_db_path(self) -> Path:
        """Get the database file path, creating the data directory."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir / "vita_harmony.db"


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()

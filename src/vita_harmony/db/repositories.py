"""Data access layer for vita-harmony.

Records live in a single key-value table; each value is serialized on its own.
Reads never raise: a missing, unreadable or corrupt record yields a fresh
default. Writes are best effort and report failure by returning False.
"""

import json
import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any, TypeVar

import aiosqlite

from ..models.meditation import MeditationSession
from ..models.settings import AppSettings
from ..models.user_profile import UserProfile
from ..models.workout import Workout
from .engine import get_db_path, init_db

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Storage keys
HAS_COMPLETED_ONBOARDING = "hasCompletedOnboarding"
USER_PROFILE = "userProfile"
WORKOUT_HISTORY = "workoutHistory"
MEDITATION_HISTORY = "meditationHistory"
LAST_WORKOUT_DATE = "lastWorkoutDate"
APP_SETTINGS = "appSettings"

ALL_KEYS = [
    HAS_COMPLETED_ONBOARDING,
    USER_PROFILE,
    WORKOUT_HISTORY,
    MEDITATION_HISTORY,
    LAST_WORKOUT_DATE,
    APP_SETTINGS,
]

# Errors that mean "this stored value cannot be decoded"
DECODE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


class KeyValueStore:
    """Raw string values by key, backed by SQLite."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self._schema_ready = False

    async def _ensure_schema(self) -> None:
        if not self._schema_ready:
            await init_db(self.db_path)
            self._schema_ready = True

    async def get(self, key: str) -> str | None:
        """Get the raw value stored under a key."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = await cursor.fetchone()
            return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        """Store a raw value, replacing any previous one."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            await db.commit()

    async def delete(self, *keys: str) -> None:
        """Remove the given keys."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            await db.executemany("DELETE FROM kv_store WHERE key = ?", [(k,) for k in keys])
            await db.commit()

    async def keys(self) -> list[str]:
        """List stored keys."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT key FROM kv_store ORDER BY key")
            rows = await cursor.fetchall()
            return [row[0] for row in rows]


class _JsonRepository:
    """Shared JSON load/save helpers with default fallback."""

    def __init__(self, store: KeyValueStore | None = None, db_path: Path | None = None):
        self.store = store or KeyValueStore(db_path)

    async def _load(self, key: str, parse: Callable[[Any], T], default: Callable[[], T]) -> T:
        try:
            raw = await self.store.get(key)
        except aiosqlite.Error as e:
            logger.warning("Could not read %s, using default: %s", key, e)
            return default()

        if raw is None:
            return default()

        try:
            return parse(json.loads(raw))
        except DECODE_ERRORS as e:
            logger.warning("Stored %s is corrupt, using default: %s", key, e)
            return default()

    async def _save(self, key: str, value: Any) -> bool:
        try:
            await self.store.set(key, json.dumps(value))
        except (aiosqlite.Error, TypeError, ValueError) as e:
            logger.warning("Could not persist %s: %s", key, e)
            return False
        return True

    async def _delete(self, *keys: str) -> bool:
        try:
            await self.store.delete(*keys)
        except aiosqlite.Error as e:
            logger.warning("Could not delete %s: %s", ", ".join(keys), e)
            return False
        return True


class ProfileRepository(_JsonRepository):
    """Repository for the user profile, settings and account flags."""

    async def get_profile(self) -> UserProfile:
        """Get the stored profile, or a fresh guest profile."""
        return await self._load(
            USER_PROFILE, UserProfile.from_dict, lambda: UserProfile(is_guest=True)
        )

    async def save_profile(self, profile: UserProfile) -> bool:
        return await self._save(USER_PROFILE, profile.to_dict())

    async def get_settings(self) -> AppSettings:
        return await self._load(APP_SETTINGS, AppSettings.from_dict, AppSettings)

    async def save_settings(self, settings: AppSettings) -> bool:
        return await self._save(APP_SETTINGS, settings.to_dict())

    async def has_completed_onboarding(self) -> bool:
        return await self._load(HAS_COMPLETED_ONBOARDING, bool, lambda: False)

    async def set_completed_onboarding(self, completed: bool) -> bool:
        return await self._save(HAS_COMPLETED_ONBOARDING, completed)

    async def get_last_activity_date(self) -> date | None:
        return await self._load(LAST_WORKOUT_DATE, date.fromisoformat, lambda: None)

    async def set_last_activity_date(self, day: date) -> bool:
        return await self._save(LAST_WORKOUT_DATE, day.isoformat())

    async def clear_all(self) -> bool:
        """Remove every stored record."""
        return await self._delete(*ALL_KEYS)


def _parse_workouts(data: list) -> list[Workout]:
    return [Workout.from_dict(item) for item in data]


def _parse_sessions(data: list) -> list[MeditationSession]:
    return [MeditationSession.from_dict(item) for item in data]


class HistoryRepository(_JsonRepository):
    """Repository for completed workouts and meditation sessions."""

    async def get_workouts(self) -> list[Workout]:
        return await self._load(WORKOUT_HISTORY, _parse_workouts, list)

    async def save_workouts(self, history: list[Workout]) -> bool:
        return await self._save(WORKOUT_HISTORY, [w.to_dict() for w in history])

    async def get_meditations(self) -> list[MeditationSession]:
        return await self._load(MEDITATION_HISTORY, _parse_sessions, list)

    async def save_meditations(self, history: list[MeditationSession]) -> bool:
        return await self._save(MEDITATION_HISTORY, [s.to_dict() for s in history])

"""Tests for the key-value store, repositories and profile service."""

import asyncio
import json
from datetime import date

import pytest

from vita_harmony.db import HistoryRepository, KeyValueStore, ProfileRepository
from vita_harmony.db.repositories import (
    ALL_KEYS,
    APP_SETTINGS,
    LAST_WORKOUT_DATE,
    USER_PROFILE,
    WORKOUT_HISTORY,
)
from vita_harmony.models.settings import AppSettings
from vita_harmony.models.user_profile import FitnessGoal, FitnessLevel
from vita_harmony.services.profile import ProfileService


class TestKeyValueStore:
    """Tests for the raw key-value table."""

    def test_set_get(self, temp_db_path):
        async def scenario():
            store = KeyValueStore(temp_db_path)
            await store.set("a", "1")
            await store.set("a", "2")
            return await store.get("a"), await store.get("missing")

        assert asyncio.run(scenario()) == ("2", None)

    def test_delete_and_keys(self, temp_db_path):
        async def scenario():
            store = KeyValueStore(temp_db_path)
            await store.set("a", "1")
            await store.set("b", "2")
            await store.delete("a")
            return await store.keys()

        assert asyncio.run(scenario()) == ["b"]


class TestProfileRepository:
    """Tests for profile persistence and fallback."""

    def test_missing_profile_is_guest(self, temp_db_path):
        profile = asyncio.run(ProfileRepository(db_path=temp_db_path).get_profile())

        assert profile.is_guest
        assert profile.name == "Guest"

    def test_profile_round_trip(self, temp_db_path, sample_user_profile):
        async def scenario():
            repo = ProfileRepository(db_path=temp_db_path)
            assert await repo.save_profile(sample_user_profile)
            return await repo.get_profile()

        assert asyncio.run(scenario()) == sample_user_profile

    def test_corrupt_profile_falls_back(self, temp_db_path, caplog):
        async def scenario():
            store = KeyValueStore(temp_db_path)
            await store.set(USER_PROFILE, "{not json")
            return await ProfileRepository(store).get_profile()

        profile = asyncio.run(scenario())
        assert profile.is_guest
        assert "corrupt" in caplog.text

    def test_invalid_profile_fields_fall_back(self, temp_db_path):
        async def scenario():
            store = KeyValueStore(temp_db_path)
            await store.set(USER_PROFILE, '{"id": "x", "fitness_goal": "Jetpack"}')
            return await ProfileRepository(store).get_profile()

        assert asyncio.run(scenario()).is_guest

    def test_wrong_typed_counter_falls_back(self, temp_db_path):
        async def scenario():
            store = KeyValueStore(temp_db_path)
            await store.set(
                USER_PROFILE,
                '{"id": "x", "created_at": "2024-01-01T00:00:00", "total_workouts": "7"}',
            )
            service = await ProfileService.load(ProfileRepository(store))
            await service.record_workout(today=date(2024, 5, 1))
            return service.profile

        profile = asyncio.run(scenario())
        assert profile.is_guest
        assert profile.total_workouts == 1

    def test_wrong_typed_settings_fall_back(self, temp_db_path):
        async def scenario():
            store = KeyValueStore(temp_db_path)
            await store.set(APP_SETTINGS, '{"sound_enabled": "no"}')
            return await ProfileRepository(store).get_settings()

        assert asyncio.run(scenario()) == AppSettings()

    def test_corrupt_settings_fall_back(self, temp_db_path):
        async def scenario():
            store = KeyValueStore(temp_db_path)
            await store.set(APP_SETTINGS, "[1, 2]")
            return await ProfileRepository(store).get_settings()

        assert asyncio.run(scenario()) == AppSettings()

    def test_settings_round_trip(self, temp_db_path):
        async def scenario():
            repo = ProfileRepository(db_path=temp_db_path)
            settings = AppSettings(sound_enabled=False, reminder_time="07:30")
            await repo.save_settings(settings)
            return await repo.get_settings()

        loaded = asyncio.run(scenario())
        assert loaded.sound_enabled is False
        assert loaded.reminder_time == "07:30"

    def test_last_activity_date(self, temp_db_path):
        async def scenario():
            repo = ProfileRepository(db_path=temp_db_path)
            before = await repo.get_last_activity_date()
            await repo.set_last_activity_date(date(2024, 5, 1))
            raw = await repo.store.get(LAST_WORKOUT_DATE)
            return before, await repo.get_last_activity_date(), raw

        before, after, raw = asyncio.run(scenario())
        assert before is None
        assert after == date(2024, 5, 1)
        assert raw == '"2024-05-01"'

    def test_onboarding_flag(self, temp_db_path):
        async def scenario():
            repo = ProfileRepository(db_path=temp_db_path)
            before = await repo.has_completed_onboarding()
            await repo.set_completed_onboarding(True)
            return before, await repo.has_completed_onboarding()

        assert asyncio.run(scenario()) == (False, True)

    def test_unwritable_database_does_not_raise(self, tmp_path):
        # The parent directory does not exist, so every write fails
        repo = ProfileRepository(db_path=tmp_path / "missing" / "test.db")

        async def scenario():
            saved = await repo.save_settings(AppSettings())
            return saved, await repo.get_settings()

        saved, loaded = asyncio.run(scenario())
        assert saved is False
        assert loaded == AppSettings()


class TestHistoryRepository:
    """Tests for workout and meditation history."""

    def test_empty_history(self, temp_db_path):
        repo = HistoryRepository(db_path=temp_db_path)

        assert asyncio.run(repo.get_workouts()) == []
        assert asyncio.run(repo.get_meditations()) == []

    def test_history_round_trip(self, temp_db_path, short_workout, short_meditation):
        async def scenario():
            repo = HistoryRepository(db_path=temp_db_path)
            await repo.save_workouts([short_workout])
            await repo.save_meditations([short_meditation])
            return await repo.get_workouts(), await repo.get_meditations()

        workouts, sessions = asyncio.run(scenario())
        assert workouts == [short_workout]
        assert sessions == [short_meditation]

    def test_corrupt_history_falls_back(self, temp_db_path):
        async def scenario():
            store = KeyValueStore(temp_db_path)
            await store.set(WORKOUT_HISTORY, '[{"name": "no id"}]')
            return await HistoryRepository(store).get_workouts()

        assert asyncio.run(scenario()) == []

    def test_wrong_typed_duration_falls_back(self, temp_db_path, short_workout):
        data = short_workout.to_dict()
        data["duration"] = "1200"

        async def scenario():
            store = KeyValueStore(temp_db_path)
            await store.set(WORKOUT_HISTORY, json.dumps([data]))
            return await HistoryRepository(store).get_workouts()

        assert asyncio.run(scenario()) == []


class TestProfileService:
    """Tests for counters, streak and account actions."""

    def test_record_workout_starts_streak(self, temp_db_path):
        async def scenario():
            service = await ProfileService.load(ProfileRepository(db_path=temp_db_path))
            await service.record_workout(today=date(2024, 5, 1))
            return service.profile, await service.repo.get_last_activity_date()

        profile, last = asyncio.run(scenario())
        assert profile.total_workouts == 1
        assert profile.streak == 1
        assert last == date(2024, 5, 1)

    def test_streak_over_days(self, temp_db_path):
        async def scenario():
            repo = ProfileRepository(db_path=temp_db_path)
            service = await ProfileService.load(repo)
            await service.record_workout(today=date(2024, 5, 1))
            await service.record_meditation(10, today=date(2024, 5, 1))
            await service.record_workout(today=date(2024, 5, 2))
            streak_after_two_days = service.profile.streak
            await service.record_workout(today=date(2024, 5, 5))
            return streak_after_two_days, await repo.get_profile()

        streak_after_two_days, stored = asyncio.run(scenario())
        assert streak_after_two_days == 2
        assert stored.streak == 1
        assert stored.total_workouts == 3
        assert stored.total_meditation_minutes == 10

    def test_update_profile(self, temp_db_path):
        async def scenario():
            repo = ProfileRepository(db_path=temp_db_path)
            service = await ProfileService.load(repo)
            await service.update_profile(
                name="Ana", fitness_goal="Endurance", fitness_level=FitnessLevel.ADVANCED, age=None
            )
            return await repo.get_profile()

        stored = asyncio.run(scenario())
        assert stored.name == "Ana"
        assert stored.fitness_goal == FitnessGoal.ENDURANCE
        assert stored.fitness_level == FitnessLevel.ADVANCED
        assert stored.age is None

    def test_update_unknown_field(self, temp_db_path):
        async def scenario():
            service = await ProfileService.load(ProfileRepository(db_path=temp_db_path))
            await service.update_profile(shoe_size=42)

        with pytest.raises(ValueError, match="shoe_size"):
            asyncio.run(scenario())

    def test_delete_account(self, temp_db_path, sample_user_profile):
        async def scenario():
            repo = ProfileRepository(db_path=temp_db_path)
            service = ProfileService(repo, sample_user_profile)
            await service.save()
            await service.record_workout(today=date(2024, 5, 1))
            await repo.save_settings(AppSettings(sound_enabled=False))
            await repo.set_completed_onboarding(True)
            await HistoryRepository(repo.store).save_workouts([])

            await service.delete_account()
            return (
                service.profile,
                await repo.get_settings(),
                await repo.has_completed_onboarding(),
                await repo.get_last_activity_date(),
                await repo.store.keys(),
            )

        profile, settings, onboarded, last, keys = asyncio.run(scenario())
        assert profile.is_guest
        assert profile.total_workouts == 0
        assert settings == AppSettings()
        assert onboarded is False
        assert last is None
        assert set(keys) <= set(ALL_KEYS)
        assert WORKOUT_HISTORY not in keys

    def test_logout(self, temp_db_path, sample_user_profile):
        async def scenario():
            repo = ProfileRepository(db_path=temp_db_path)
            service = ProfileService(repo, sample_user_profile)
            await service.complete_onboarding(sample_user_profile)
            await service.logout()
            return service.profile, await repo.has_completed_onboarding()

        profile, onboarded = asyncio.run(scenario())
        assert profile.is_guest
        assert onboarded is False

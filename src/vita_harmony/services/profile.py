"""Profile, settings and account management."""

import logging
from datetime import date

from ..db.repositories import ProfileRepository
from ..models.settings import AppSettings
from ..models.user_profile import FitnessGoal, FitnessLevel, UserProfile
from .streak import local_today, update_streak

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "name",
    "email",
    "fitness_goal",
    "fitness_level",
    "age",
    "weight",
    "height",
}


class ProfileService:
    """Owns the in-memory profile and persists every change."""

    def __init__(
        self,
        repo: ProfileRepository,
        profile: UserProfile | None = None,
        timezone: str = "local",
    ):
        self.repo = repo
        self.profile = profile or UserProfile(is_guest=True)
        self.timezone = timezone

    @classmethod
    async def load(cls, repo: ProfileRepository, timezone: str = "local") -> "ProfileService":
        """Create a service around the stored profile."""
        profile = await repo.get_profile()
        return cls(repo, profile, timezone)

    async def save(self) -> bool:
        return await self.repo.save_profile(self.profile)

    async def update_profile(self, **fields) -> UserProfile:
        """Update the given profile fields; None values are ignored."""
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown profile field(s): {', '.join(sorted(unknown))}")

        for name, value in fields.items():
            if value is None:
                continue
            if name == "fitness_goal":
                value = FitnessGoal(value)
            elif name == "fitness_level":
                value = FitnessLevel(value)
            setattr(self.profile, name, value)

        await self.save()
        return self.profile

    async def set_workout_duration(self, minutes: int) -> None:
        self.profile.preferred_workout_duration = minutes
        await self.save()

    async def set_meditation_duration(self, minutes: int) -> None:
        self.profile.preferred_meditation_duration = minutes
        await self.save()

    async def record_workout(self, today: date | None = None) -> UserProfile:
        """Count a finished workout and continue the streak."""
        self.profile.total_workouts += 1
        await self._update_streak(today)
        await self.save()
        return self.profile

    async def record_meditation(self, minutes: int, today: date | None = None) -> UserProfile:
        """Add meditation minutes and continue the streak."""
        self.profile.total_meditation_minutes += minutes
        await self._update_streak(today)
        await self.save()
        return self.profile

    async def _update_streak(self, today: date | None) -> None:
        if today is None:
            today = local_today(self.timezone)
        last_activity = await self.repo.get_last_activity_date()
        self.profile.streak, stored = update_streak(self.profile.streak, last_activity, today)
        await self.repo.set_last_activity_date(stored)

    async def complete_onboarding(self, profile: UserProfile) -> None:
        """Adopt the profile collected during onboarding."""
        self.profile = profile
        await self.save()
        await self.repo.set_completed_onboarding(True)

    async def logout(self) -> None:
        """Switch to a guest profile and require onboarding again."""
        self.profile = UserProfile(is_guest=True)
        await self.repo.set_completed_onboarding(False)

    async def delete_account(self) -> AppSettings:
        """Clear all stored data and reset to a guest profile."""
        logger.info("Deleting all local data for profile %s", self.profile.id)
        self.profile = UserProfile(is_guest=True)
        await self.repo.clear_all()
        await self.repo.set_completed_onboarding(False)
        settings = AppSettings()
        await self.repo.save_settings(settings)
        return settings

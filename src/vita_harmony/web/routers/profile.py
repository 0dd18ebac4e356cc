"""Profile and settings routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ...config import get_settings
from ...db import ProfileRepository, get_db_path
from ...models.user_profile import FitnessGoal, FitnessLevel
from ...services.profile import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


class ProfileUpdate(BaseModel):
    name: str | None = None
    email: str | None = None
    fitness_goal: FitnessGoal | None = None
    fitness_level: FitnessLevel | None = None
    age: int | None = Field(default=None, gt=0)
    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    preferred_workout_duration: int | None = Field(default=None, ge=15, le=60)
    preferred_meditation_duration: int | None = Field(default=None, ge=5, le=30)


class SettingsUpdate(BaseModel):
    notifications_enabled: bool | None = None
    reminder_time: str | None = Field(default=None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    sound_enabled: bool | None = None
    haptics_enabled: bool | None = None
    dark_mode_enabled: bool | None = None


def _repo() -> ProfileRepository:
    return ProfileRepository(db_path=get_db_path())


def _profile_payload(service: ProfileService) -> dict:
    data = service.profile.to_dict()
    data["bmi"] = service.profile.bmi()
    data["bmi_category"] = service.profile.bmi_category()
    return data


@router.get("")
async def get_profile():
    """Get the current profile."""
    service = await ProfileService.load(_repo(), get_settings().timezone)
    return _profile_payload(service)


@router.put("")
async def update_profile(update: ProfileUpdate):
    """Update profile fields and duration preferences."""
    service = await ProfileService.load(_repo(), get_settings().timezone)
    fields = update.model_dump(
        exclude_none=True,
        exclude={"preferred_workout_duration", "preferred_meditation_duration"},
    )
    try:
        await service.update_profile(**fields)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if update.preferred_workout_duration is not None:
        await service.set_workout_duration(update.preferred_workout_duration)
    if update.preferred_meditation_duration is not None:
        await service.set_meditation_duration(update.preferred_meditation_duration)

    return _profile_payload(service)


@router.get("/settings")
async def get_app_settings():
    """Get app settings."""
    return (await _repo().get_settings()).to_dict()


@router.put("/settings")
async def update_app_settings(update: SettingsUpdate):
    """Update app settings."""
    repo = _repo()
    current = await repo.get_settings()
    for name, value in update.model_dump(exclude_none=True).items():
        setattr(current, name, value)
    await repo.save_settings(current)
    return current.to_dict()

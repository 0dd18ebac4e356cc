"""Catalog routes."""

from fastapi import APIRouter

from ...catalog import (
    all_meditation_sessions,
    all_workouts,
    generate_meditation_sessions,
    generate_workouts,
)
from ...db import ProfileRepository, get_db_path

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/workouts")
async def list_workouts(all: bool = False):
    """Workouts for the profile's goal and level, or every goal with ``all``."""
    profile = await ProfileRepository(db_path=get_db_path()).get_profile()
    items = all_workouts(profile.fitness_level) if all else generate_workouts(profile)
    return [w.to_dict() for w in items]


@router.get("/meditations")
async def list_meditations(all: bool = False):
    """Sessions near the preferred meditation length, or every session with ``all``."""
    profile = await ProfileRepository(db_path=get_db_path()).get_profile()
    items = all_meditation_sessions() if all else generate_meditation_sessions(profile)
    return [s.to_dict() for s in items]

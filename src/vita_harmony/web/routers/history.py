"""History and stats routes."""

from fastapi import APIRouter

from ...db import HistoryRepository, ProfileRepository, get_db_path
from ...services.feedback import streak_message
from ...services.stats import compute_stats

router = APIRouter(prefix="/history", tags=["history"])


@router.get("")
async def get_history():
    """Completed workouts and meditation sessions."""
    repo = HistoryRepository(db_path=get_db_path())
    return {
        "workouts": [w.to_dict() for w in await repo.get_workouts()],
        "meditations": [s.to_dict() for s in await repo.get_meditations()],
    }


@router.get("/stats")
async def get_stats():
    """Dashboard statistics with the current streak."""
    db_path = get_db_path()
    repo = HistoryRepository(db_path=db_path)
    profile = await ProfileRepository(db_path=db_path).get_profile()

    stats = compute_stats(await repo.get_workouts(), await repo.get_meditations()).to_dict()
    stats["streak"] = profile.streak
    stats["streak_message"] = streak_message(profile.streak) if profile.streak > 0 else None
    return stats

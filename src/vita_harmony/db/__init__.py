"""Database layer for vita-harmony."""

from .engine import get_db_path, init_db
from .repositories import HistoryRepository, KeyValueStore, ProfileRepository

__all__ = [
    "get_db_path",
    "HistoryRepository",
    "init_db",
    "KeyValueStore",
    "ProfileRepository",
]

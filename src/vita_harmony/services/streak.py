"""Daily activity streak calculation.

Streaks count local calendar days, not 24-hour windows. "Today" is the
calendar date in the configured timezone (``Settings.timezone``); "local"
means the system timezone.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo


def local_today(timezone: str = "local", now: datetime | None = None) -> date:
    """Today's calendar date in the given timezone.

    Args:
        timezone: IANA zone name, or "local" for the system zone
        now: Optional aware or naive instant to convert instead of the clock
    """
    if timezone == "local":
        current = now if now is not None else datetime.now()
        if current.tzinfo is not None:
            current = current.astimezone()
        return current.date()

    tz = ZoneInfo(timezone)
    if now is None:
        return datetime.now(tz).date()
    if now.tzinfo is None:
        now = now.astimezone()
    return now.astimezone(tz).date()


def update_streak(streak: int, last_activity: date | None, today: date) -> tuple[int, date]:
    """Continue, keep or restart a streak for activity on ``today``.

    Returns:
        The new streak and the date to store as the last activity
    """
    if last_activity is None:
        return 1, today

    day_diff = (today - last_activity).days
    if day_diff == 0:
        return streak, today
    if day_diff == 1:
        return streak + 1, today
    # Gap of two days or more, or a last-activity date in the future
    return 1, today

"""Weekly totals and goal tracking over the workout log."""

import logging
from datetime import date, timedelta

from fitlog.config import settings
from fitlog.schemas.goal import GoalProgress, WeeklySummary
from fitlog.schemas.workout import WorkoutRecord
from fitlog.services.log_store import LogStore

logger = logging.getLogger(__name__)


def weekly_records(store: LogStore, as_of: date | None = None) -> list[WorkoutRecord]:
    """
    Records dated strictly after as_of minus the window (7 days by default).
    A record from exactly 7 days before as_of is excluded; one from as_of itself is included.
    """
    to_date = as_of or store.today()
    cutoff = to_date - timedelta(days=settings.weekly_window_days)
    return [r for r in store.records if r.date > cutoff]


def weekly_duration_total(store: LogStore, as_of: date | None = None) -> int:
    return sum(r.duration for r in weekly_records(store, as_of))


def weekly_summary(store: LogStore, as_of: date | None = None) -> WeeklySummary:
    week = weekly_records(store, as_of)
    return WeeklySummary(activities=len(week), total_minutes=sum(r.duration for r in week))


def set_goal(store: LogStore, minutes: int) -> bool:
    """Set the weekly goal once. Returns False (no-op) if a non-zero goal is already set."""
    if store.weekly_goal != 0:
        logger.debug("Goal already set to %s, ignoring %s", store.weekly_goal, minutes)
        return False
    store.weekly_goal = minutes
    logger.info("Weekly goal set: %s minutes", minutes)
    return True


def track_progress(store: LogStore, as_of: date | None = None) -> GoalProgress:
    return GoalProgress(achieved=weekly_duration_total(store, as_of), goal=store.weekly_goal)

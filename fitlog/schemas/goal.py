"""Weekly aggregation results."""

from pydantic import BaseModel


class WeeklySummary(BaseModel):
    activities: int
    total_minutes: int


class GoalProgress(BaseModel):
    """Minutes logged in the weekly window against the weekly goal (0 = unset)."""

    achieved: int
    goal: int

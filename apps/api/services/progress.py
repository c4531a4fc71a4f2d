"""
Weekly Progress Service

Reduces the trailing 7 days of workouts into Monday-first day buckets of
estimated minutes and calories, plus a goal percentage against a fixed
150 minutes/week target. Recomputed from scratch on every call.

Estimates per workout:
    minutes  = sets * 2
    calories = reps * sets * weight_kg * 0.1   (weight_kg 0/None counts as 10)
"""
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from models import Workout

DAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
WINDOW_DAYS = 7
WEEKLY_GOAL_MINUTES = 150
MINUTES_PER_SET = 2
DEFAULT_WEIGHT_KG = 10
CALORIES_PER_KG_REP = 0.1


@dataclass
class WeeklySummary:
    labels: List[str] = field(default_factory=lambda: list(DAY_LABELS))
    calories: List[float] = field(default_factory=lambda: [0.0] * 7)
    workout_minutes: List[int] = field(default_factory=lambda: [0] * 7)
    total_calories: float = 0.0
    total_steps: int = 0  # no step data source yet
    weekly_goal: int = 0


def monday_first_index(sunday_first_day: int) -> int:
    """Map a Sunday=0 day-of-week index onto Monday=0."""
    return (sunday_first_day + 6) % 7


def sunday_first_day(ts: datetime) -> int:
    """Day of week as the database reports it (Sunday=0 .. Saturday=6)."""
    return int(ts.strftime("%w"))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def weekly_goal_percent(total_minutes: float) -> int:
    """Share of the 150 minute target, capped at 100."""
    return min(100, round_half_up(total_minutes / WEEKLY_GOAL_MINUTES * 100))


def summarize_week(workouts: Iterable) -> WeeklySummary:
    """
    Bucket workouts by day of week.

    ``workouts`` only needs ``created_at``, ``sets``, ``reps`` and
    ``weight_kg`` attributes, so plain objects work as well as rows.
    """
    summary = WeeklySummary()

    for w in workouts:
        idx = monday_first_index(sunday_first_day(w.created_at))
        sets = w.sets or 0
        reps = w.reps or 0
        weight = w.weight_kg or DEFAULT_WEIGHT_KG

        summary.workout_minutes[idx] += sets * MINUTES_PER_SET
        summary.calories[idx] += reps * sets * weight * CALORIES_PER_KG_REP

    summary.total_calories = sum(summary.calories)
    summary.weekly_goal = weekly_goal_percent(sum(summary.workout_minutes))
    return summary


def get_weekly_progress(db: Session, user_id: int, now: Optional[datetime] = None) -> WeeklySummary:
    """Load the user's workouts from the trailing window and summarize them."""
    now = now or datetime.now(timezone.utc)
    since = now - timedelta(days=WINDOW_DAYS)

    workouts = (
        db.query(Workout)
        .filter(Workout.user_id == user_id, Workout.created_at >= since)
        .all()
    )
    return summarize_week(workouts)

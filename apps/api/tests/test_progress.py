"""
Unit tests for the weekly progress reduction.

2024-01-15 is a Monday, 2024-01-17 a Wednesday, 2024-01-21 a Sunday.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pytest

from services.progress import (
    DAY_LABELS,
    monday_first_index,
    round_half_up,
    summarize_week,
    sunday_first_day,
    weekly_goal_percent,
)


@dataclass
class FakeWorkout:
    created_at: datetime
    sets: Optional[int]
    reps: Optional[int]
    weight_kg: Optional[float]


MONDAY = datetime(2024, 1, 15, 9, 30)
WEDNESDAY = datetime(2024, 1, 17, 18, 0)
SUNDAY = datetime(2024, 1, 21, 7, 0)


class TestDayRemapping:

    @pytest.mark.parametrize("sunday_first,monday_first", [
        (0, 6),  # Sunday
        (1, 0),  # Monday
        (2, 1),
        (3, 2),
        (4, 3),
        (5, 4),
        (6, 5),  # Saturday
    ])
    def test_monday_first_index(self, sunday_first, monday_first):
        assert monday_first_index(sunday_first) == monday_first

    def test_sunday_first_day(self):
        assert sunday_first_day(SUNDAY) == 0
        assert sunday_first_day(MONDAY) == 1
        assert sunday_first_day(WEDNESDAY) == 3


class TestWeeklyGoal:

    def test_goal_percentage(self):
        assert weekly_goal_percent(30) == 20
        assert weekly_goal_percent(75) == 50
        assert weekly_goal_percent(0) == 0

    def test_goal_capped_at_100(self):
        assert weekly_goal_percent(150) == 100
        assert weekly_goal_percent(400) == 100

    def test_goal_rounds_to_nearest(self):
        assert weekly_goal_percent(2) == 1   # 1.33
        assert weekly_goal_percent(4) == 3   # 2.67

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2


class TestSummarizeWeek:

    def test_monday_and_wednesday_example(self):
        summary = summarize_week([
            FakeWorkout(MONDAY, sets=10, reps=5, weight_kg=20),
            FakeWorkout(WEDNESDAY, sets=5, reps=5, weight_kg=0),
        ])

        assert summary.labels == DAY_LABELS
        assert summary.workout_minutes == [20, 0, 10, 0, 0, 0, 0]
        assert summary.calories[0] == pytest.approx(100)
        assert summary.calories[2] == pytest.approx(25)  # zero weight counts as 10kg
        assert summary.total_calories == pytest.approx(125)
        assert summary.weekly_goal == 20
        assert summary.total_steps == 0

    def test_sunday_lands_in_last_slot(self):
        summary = summarize_week([FakeWorkout(SUNDAY, sets=3, reps=10, weight_kg=50)])

        assert summary.workout_minutes == [0, 0, 0, 0, 0, 0, 6]
        assert summary.calories[6] == pytest.approx(150)

    def test_same_day_workouts_accumulate(self):
        summary = summarize_week([
            FakeWorkout(MONDAY, sets=2, reps=10, weight_kg=10),
            FakeWorkout(MONDAY.replace(hour=20), sets=3, reps=10, weight_kg=10),
        ])

        assert summary.workout_minutes[0] == 10
        assert summary.calories[0] == pytest.approx(50)

    def test_null_fields_count_as_zero(self):
        summary = summarize_week([FakeWorkout(MONDAY, sets=None, reps=None, weight_kg=None)])

        assert summary.workout_minutes == [0] * 7
        assert summary.calories == [0] * 7
        assert summary.weekly_goal == 0

    def test_null_weight_uses_default(self):
        summary = summarize_week([FakeWorkout(MONDAY, sets=1, reps=30, weight_kg=None)])
        assert summary.calories[0] == pytest.approx(30)

    def test_no_workouts(self):
        summary = summarize_week([])

        assert summary.workout_minutes == [0] * 7
        assert summary.total_calories == 0
        assert summary.weekly_goal == 0

    def test_busy_week_caps_goal(self):
        workouts = [FakeWorkout(MONDAY, sets=50, reps=1, weight_kg=1) for _ in range(2)]
        summary = summarize_week(workouts)

        assert sum(summary.workout_minutes) == 200
        assert summary.weekly_goal == 100

"""
Integration tests for GET /api/progress.
"""
from datetime import datetime, timedelta

import pytest

from conftest import auth_headers
from models import Workout


def _slot(ts: datetime) -> int:
    return ts.weekday()  # Monday=0


class TestProgressEndpoint:

    def test_empty_week(self, client, test_user):
        response = client.get("/api/progress", headers=auth_headers(test_user))

        assert response.status_code == 200
        assert response.json() == {
            "labels": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
            "calories": [0, 0, 0, 0, 0, 0, 0],
            "workoutMinutes": [0, 0, 0, 0, 0, 0, 0],
            "totalCalories": 0,
            "totalSteps": 0,
            "weeklyGoal": 0,
        }

    def test_only_trailing_seven_days_count(self, client, db_session, test_user):
        now = datetime.utcnow()
        recent = now - timedelta(days=2)
        stale = now - timedelta(days=8)
        db_session.add_all([
            Workout(user_id=test_user.id, exercise_name="recent", sets=10, reps=5, weight_kg=20, created_at=recent),
            Workout(user_id=test_user.id, exercise_name="stale", sets=40, reps=5, weight_kg=20, created_at=stale),
        ])
        db_session.commit()

        data = client.get("/api/progress", headers=auth_headers(test_user)).json()

        expected_minutes = [0] * 7
        expected_minutes[_slot(recent)] = 20
        assert data["workoutMinutes"] == expected_minutes
        assert data["calories"][_slot(recent)] == pytest.approx(100)
        assert data["totalCalories"] == pytest.approx(100)
        assert data["weeklyGoal"] == 13  # 20/150 -> 13.3%

    def test_other_users_workouts_ignored(self, client, db_session, test_user, other_user):
        db_session.add(Workout(user_id=other_user.id, exercise_name="x", sets=10, reps=10,
                               weight_kg=10, created_at=datetime.utcnow()))
        db_session.commit()

        data = client.get("/api/progress", headers=auth_headers(test_user)).json()

        assert data["totalCalories"] == 0
        assert data["weeklyGoal"] == 0

    def test_logged_workout_counts_immediately(self, client, test_user):
        headers = auth_headers(test_user)
        client.post("/api/workout", json={"exerciseName": "Row", "sets": 5, "reps": 5, "weightKg": 0},
                    headers=headers)

        data = client.get("/api/progress", headers=headers).json()

        assert sum(data["workoutMinutes"]) == 10
        assert data["totalCalories"] == pytest.approx(25)
        assert data["weeklyGoal"] == 7  # 10/150 -> 6.67%

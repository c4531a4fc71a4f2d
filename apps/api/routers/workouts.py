"""
Workout log API endpoints.

Append-only per-user log. Numbers are stored as given; there is no range
validation beyond the column types.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from core.auth import Identity, get_current_identity
from core.database import get_db
from core.exceptions import StoreError
from models import Workout
from schemas import WorkoutCreate, WorkoutResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["workout"])


@router.get("/workout", response_model=List[WorkoutResponse])
def get_workouts(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """All workouts for the authenticated user, newest first."""
    try:
        return (
            db.query(Workout)
            .filter(Workout.user_id == identity.user_id)
            .order_by(Workout.created_at.desc(), Workout.id.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.error("Failed to fetch workouts", exc_info=True)
        raise StoreError("Failed to fetch workouts")


@router.post("/workout", response_model=WorkoutResponse)
def create_workout(
    workout: WorkoutCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Log a workout and return the stored row."""
    db_workout = Workout(
        user_id=identity.user_id,
        exercise_name=workout.exercise_name,
        sets=workout.sets,
        reps=workout.reps,
        weight_kg=workout.weight_kg,
    )

    try:
        db.add(db_workout)
        db.commit()
        db.refresh(db_workout)
    except SQLAlchemyError:
        db.rollback()
        logger.error("Failed to add workout", exc_info=True)
        raise StoreError("Failed to add workout")

    return db_workout

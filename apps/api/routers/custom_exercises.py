"""
Custom exercise API endpoints.

User-defined exercises (name, category, duration, notes).
"""
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from core.auth import Identity, get_current_identity
from core.database import get_db
from core.exceptions import StoreError
from models import CustomExercise
from schemas import CustomExerciseCreate, CustomExerciseResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["customexercise"])


@router.get("/customexercise", response_model=List[CustomExerciseResponse])
def get_custom_exercises(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    try:
        return (
            db.query(CustomExercise)
            .filter(CustomExercise.user_id == identity.user_id)
            .order_by(CustomExercise.created_at.desc(), CustomExercise.id.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.error("Failed to fetch custom exercises", exc_info=True)
        raise StoreError("Failed to fetch custom exercises")


@router.post("/customexercise", response_model=CustomExerciseResponse)
def create_custom_exercise(
    exercise: CustomExerciseCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    db_exercise = CustomExercise(
        user_id=identity.user_id,
        name=exercise.name,
        category=exercise.category,
        duration=exercise.duration,
        notes=exercise.notes,
    )

    try:
        db.add(db_exercise)
        db.commit()
        db.refresh(db_exercise)
    except SQLAlchemyError:
        db.rollback()
        logger.error("Failed to add custom exercise", exc_info=True)
        raise StoreError("Failed to add custom exercise")

    return db_exercise

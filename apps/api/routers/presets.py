"""
Preset exercise catalog.

The catalog is read-only reference data. "Completing" a preset logs it as
a workout: one set, the preset duration as reps, no weight.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func
from typing import List
import logging

from core.auth import Identity, get_current_identity
from core.database import get_db
from core.exceptions import NotFoundError, StoreError
from models import PresetExercise, Workout
from schemas import PresetExerciseResponse, PresetComplete, PresetCompleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/presets", tags=["presets"])


@router.get("", response_model=List[PresetExerciseResponse])
def get_presets(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Every preset, in catalog (id) order."""
    try:
        return db.query(PresetExercise).order_by(PresetExercise.id.asc()).all()
    except SQLAlchemyError:
        logger.error("Failed to fetch presets", exc_info=True)
        raise StoreError("Failed to fetch presets")


@router.post("/complete", response_model=PresetCompleteResponse)
def complete_preset(
    payload: PresetComplete,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Log a preset as a completed workout."""
    try:
        preset = None
        if payload.preset_id is not None:
            preset = db.query(PresetExercise).filter(PresetExercise.id == payload.preset_id).first()
        if not preset:
            raise NotFoundError("Preset not found")

        workout = Workout(
            user_id=identity.user_id,
            exercise_name=preset.name,
            sets=1,
            reps=preset.duration,
            weight_kg=0,
            created_at=func.now(),
        )
        db.add(workout)
        db.commit()
        db.refresh(workout)
    except SQLAlchemyError:
        db.rollback()
        logger.error("Failed to complete preset", exc_info=True)
        raise StoreError("Failed to complete preset")

    logger.info(f"User {identity.user_id} completed preset {preset.id}")
    return {"success": True, "workout": workout}

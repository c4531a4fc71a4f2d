"""
Progress API Router

Weekly activity summary for the dashboard: per-day minutes and calories
over the trailing 7 days and the share of the weekly goal reached.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.auth import Identity, get_current_identity
from core.database import get_db
from core.exceptions import StoreError
from schemas import WeeklyProgressResponse
from services.progress import get_weekly_progress

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.get("", response_model=WeeklyProgressResponse)
def get_progress(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    try:
        summary = get_weekly_progress(db, identity.user_id)
    except SQLAlchemyError:
        logger.error("Failed to calculate progress", exc_info=True)
        raise StoreError("Failed to calculate progress")

    return WeeklyProgressResponse(
        labels=summary.labels,
        calories=summary.calories,
        workout_minutes=summary.workout_minutes,
        total_calories=summary.total_calories,
        total_steps=summary.total_steps,
        weekly_goal=summary.weekly_goal,
    )

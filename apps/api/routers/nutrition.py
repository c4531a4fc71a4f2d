"""
Nutrition API Endpoints

Meal log per user: name, meal type and macros. Entries are append-only.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from core.auth import Identity, get_current_identity
from core.database import get_db
from core.exceptions import StoreError
from models import NutritionEntry
from schemas import NutritionEntryCreate, NutritionEntryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["nutrition"])


@router.post("/nutrition", response_model=NutritionEntryResponse)
def create_nutrition_entry(
    nutrition: NutritionEntryCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Log a meal for the authenticated user."""
    db_entry = NutritionEntry(
        user_id=identity.user_id,
        name=nutrition.name,
        meal_type=nutrition.meal_type,
        protein_grams=nutrition.protein_grams,
        fat_grams=nutrition.fat_grams,
    )

    try:
        db.add(db_entry)
        db.commit()
        db.refresh(db_entry)
    except SQLAlchemyError:
        db.rollback()
        logger.error("Failed to add meal", exc_info=True)
        raise StoreError("Failed to add meal")

    return db_entry


@router.get("/nutrition", response_model=List[NutritionEntryResponse])
def get_nutrition_entries(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Get meals for the authenticated user, newest first."""
    try:
        return (
            db.query(NutritionEntry)
            .filter(NutritionEntry.user_id == identity.user_id)
            .order_by(NutritionEntry.created_at.desc(), NutritionEntry.id.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.error("Failed to fetch meals", exc_info=True)
        raise StoreError("Failed to fetch meals")

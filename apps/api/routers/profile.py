"""
Profile API Endpoints

Core user fields joined with body/profile attributes. Updates are partial
and merged field by field over the stored profile; every update that
leaves both weight and height set appends a BMI history row.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func
from typing import List
import logging

from core.auth import Identity, get_current_identity
from core.database import get_db
from core.exceptions import ConflictError, NotFoundError, StoreError
from models import User, Profile, BmiHistory
from schemas import ProfileUpdate, ProfileResponse, SuccessResponse, BmiHistoryResponse
from services.bmi_calculator import calculate_bmi
from services.profile_merge import ProfileFields, merge_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile", tags=["profile"])


def upsert_profile(db: Session, user_id: int, merged: ProfileFields) -> None:
    """
    Write the merged profile with the database's own insert-or-update.

    Two concurrent updates for the same user cannot both insert.
    """
    insert = pg_insert if db.get_bind().dialect.name == "postgresql" else sqlite_insert
    values = merged.as_dict()
    stmt = insert(Profile.__table__).values(user_id=user_id, **values)
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id"],
        set_={**values, "updated_at": func.now()},
    )
    db.execute(stmt)


@router.get("", response_model=ProfileResponse)
def get_profile(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Get user + profile fields. Profile fields are null until the first update."""
    try:
        user = db.query(User).filter(User.id == identity.user_id).first()
        profile = db.query(Profile).filter(Profile.user_id == identity.user_id).first()
    except SQLAlchemyError:
        logger.error("Failed to fetch profile", exc_info=True)
        raise StoreError("Failed to fetch profile")

    if not user:
        raise NotFoundError("User not found")

    stored = ProfileFields.from_object(profile) if profile else ProfileFields()
    return ProfileResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        display_name=user.display_name,
        **stored.as_dict(),
    )


@router.put("", response_model=SuccessResponse)
def update_profile(
    update: ProfileUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """
    Update any subset of profile fields.

    - email (if non-empty) goes straight to the user record
    - every other field overrides the stored value only when non-null
    - BMI is appended whenever the merged profile has weight and height,
      even if neither changed in this request
    """
    user_id = identity.user_id

    try:
        if update.email:
            db.query(User).filter(User.id == user_id).update({User.email: update.email})

        existing = db.query(Profile).filter(Profile.user_id == user_id).first()
        current = ProfileFields.from_object(existing) if existing else None
        merged = merge_profile(current, ProfileFields.from_object(update))

        upsert_profile(db, user_id, merged)

        bmi = calculate_bmi(merged.weight_kg, merged.height_cm)
        if bmi is not None:
            db.add(BmiHistory(user_id=user_id, bmi=bmi))

        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"Profile update for user {user_id} rejected: email already in use")
        raise ConflictError("Profile update failed")
    except SQLAlchemyError:
        db.rollback()
        logger.error("Profile update failed", exc_info=True)
        raise StoreError("Profile update failed")

    return {"success": True}


@router.get("/bmi-history", response_model=List[BmiHistoryResponse])
def get_bmi_history(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """BMI history for the authenticated user, newest first."""
    try:
        return (
            db.query(BmiHistory)
            .filter(BmiHistory.user_id == identity.user_id)
            .order_by(BmiHistory.recorded_at.desc(), BmiHistory.id.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.error("Failed to fetch BMI history", exc_info=True)
        raise StoreError("Failed to fetch BMI history")

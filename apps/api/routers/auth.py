"""
Authentication API endpoints.

Provides:
- User registration
- Login (JWT token generation)
"""
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from core.database import get_db
from core.exceptions import ValidationError, ConflictError, UnauthorizedError, StoreError
from core.security import (
    verify_password,
    get_password_hash,
    create_user_token,
    password_exceeds_bcrypt_limit,
)
from models import User
from schemas import UserRegister, UserLogin, RegisterResponse, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

# Same message for unknown user and wrong password (prevents enumeration)
INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/register", response_model=RegisterResponse)
def register(
    user_data: UserRegister,
    db: Session = Depends(get_db)
):
    """
    Register a new user account.

    Display name defaults to the username. A taken username or email is
    reported generically so the endpoint cannot be used to probe accounts.
    """
    if not user_data.username or not user_data.email or not user_data.password:
        raise ValidationError("Missing fields")

    if password_exceeds_bcrypt_limit(user_data.password):
        raise ValidationError("Password must not exceed 72 bytes (bcrypt limit)")

    user = User(
        username=user_data.username,
        email=user_data.email,
        password_hash=get_password_hash(user_data.password),
        display_name=user_data.display_name or user_data.username,
    )

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        db.rollback()
        logger.info(f"Registration rejected, identity already in use: {user_data.username}")
        raise ConflictError("Registration failed")
    except SQLAlchemyError:
        db.rollback()
        logger.error("Registration failed", exc_info=True)
        raise StoreError("Registration failed")

    logger.info(f"Registered user {user.id}")
    return {"success": True, "user": user}


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return JWT token.

    The token carries the user id and username and is valid for 7 days.
    """
    try:
        user = db.query(User).filter(User.username == credentials.username).first()
    except SQLAlchemyError:
        logger.error("Login lookup failed", exc_info=True)
        raise StoreError("Login failed")

    if not user or not credentials.password or password_exceeds_bcrypt_limit(credentials.password):
        raise UnauthorizedError(INVALID_CREDENTIALS)

    if not verify_password(credentials.password, user.password_hash):
        raise UnauthorizedError(INVALID_CREDENTIALS)

    token = create_user_token(user.id, user.username)
    return LoginResponse(token=token, username=user.username, display_name=user.display_name)

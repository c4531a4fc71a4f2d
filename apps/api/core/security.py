"""
Security utilities for authentication.

Provides:
- Password hashing (bcrypt)
- JWT token generation and validation

SECURITY REQUIREMENTS:
- SECRET_KEY must be set via environment variable
- SECRET_KEY must be cryptographically secure (32+ characters)
- SECRET_KEY must NEVER be committed to source control
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict
from jose import JWTError, jwt
import bcrypt
from core.config import settings

# JWT settings - SECRET_KEY is required by config.py, will fail at startup if not set
SECRET_KEY = settings.SECRET_KEY

# Validate SECRET_KEY strength at module load
if len(SECRET_KEY) < 32:
    raise ValueError(
        "SECRET_KEY must be at least 32 characters. "
        "Generate with: python -c \"import secrets; print(secrets.token_urlsafe(32))\""
    )

ALGORITHM = "HS256"
BCRYPT_MAX_PASSWORD_BYTES = 72
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_DAYS * 24 * 60  # 7 days


def password_exceeds_bcrypt_limit(password: str) -> bool:
    """bcrypt only accepts up to 72 bytes of input."""
    return len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    return bcrypt.checkpw(
        plain_password.encode('utf-8'),
        hashed_password.encode('utf-8')
    )


def get_password_hash(password: str) -> str:
    """Hash a password."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def create_access_token(
    data: Dict,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    if expires_delta is not None:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret_key or SECRET_KEY, algorithm=ALGORITHM)


def create_user_token(user_id: int, username: str) -> str:
    """Token issued at login: subject is the user id, plus the username."""
    return create_access_token({"sub": str(user_id), "username": username})


def decode_access_token(token: str, secret_key: Optional[str] = None) -> Optional[Dict]:
    """Decode and validate a JWT token (signature and expiry)."""
    try:
        payload = jwt.decode(token, secret_key or SECRET_KEY, algorithms=[ALGORITHM])
        return payload
    except JWTError:
        return None

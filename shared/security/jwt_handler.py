"""
Bearer credential issuing/verification.

JWT_SECRET_KEY falls back to an insecure default with a loud warning so local
runs and tests work without a .env file; production must set it.
"""
import os
import warnings
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt

_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "")

if not _SECRET_KEY:
    warnings.warn(
        "JWT_SECRET_KEY is not set. Using an insecure development default. "
        "Set this env var in production!",
        stacklevel=2,
    )
    _SECRET_KEY = "insecure-default-change-me"

SECRET_KEY: str = _SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "24"))
TOKEN_TYPE = "Bearer"


def expires_in_label() -> str:
    """Human readable lifetime returned alongside the token, e.g. '24h'."""
    return f"{ACCESS_TOKEN_EXPIRE_HOURS}h"


def create_access_token(customer_id: int, expires_delta: timedelta = None) -> str:
    """Creates a JWT carrying the customer id in `sub` with a UTC expiration."""
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)

    to_encode = {"sub": str(customer_id), "exp": expire}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

def verify_access_token(token: str) -> dict | None:
    """Decodes and verifies the JWT. Returns payload if valid, None if invalid/expired."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        return payload
    except JWTError:
        return None

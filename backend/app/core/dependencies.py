"""
Dependency injection utilities
"""
from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from backend.app.core.errors import ApiError
from backend.app.core.logging_config import get_logger
from backend.app.core.security import decode_access_token
from backend.app.core.validation import parse_record_id
from backend.app.db import session as db_session
from backend.app.models.user import User

logger = get_logger("auth")
security = HTTPBearer(auto_error=False)

NO_TOKEN_MSG = "No token, authorization denied"
INVALID_TOKEN_MSG = "Token is not valid"


def get_db() -> Session:
    """Get database session"""
    db = db_session.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    x_auth_token: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the caller from a bearer token (or x-auth-token header) or reject with 401."""
    token = credentials.credentials if credentials else x_auth_token
    if not token:
        raise ApiError.message(401, NO_TOKEN_MSG, headers={"WWW-Authenticate": "Bearer"})

    payload = decode_access_token(token)
    user_id = parse_record_id(payload.get("sub")) if payload else None
    if user_id is None:
        logger.warning("Rejected token: invalid signature, expiry or subject")
        raise ApiError.message(401, INVALID_TOKEN_MSG, headers={"WWW-Authenticate": "Bearer"})

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.warning("Rejected token: unknown user_id=%s", user_id)
        raise ApiError.message(401, INVALID_TOKEN_MSG, headers={"WWW-Authenticate": "Bearer"})
    return user

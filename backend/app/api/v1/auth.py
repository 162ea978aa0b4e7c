"""
Authentication endpoints - current user and login
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_current_user, get_db
from backend.app.core.errors import ApiError
from backend.app.core.logging_config import get_logger
from backend.app.core.validation import email, field_error, required, validate
from backend.app.models.user import User
from backend.app.schemas.user import TokenResponse, UserLogin, UserResponse
from backend.app.services.auth_service import AuthService

logger = get_logger("api.auth")
router = APIRouter()

LOGIN_RULES = (
    email("email", "Please include a valid email"),
    required("password", "Password is required"),
)


@router.get("", response_model=UserResponse)
def get_authenticated_user(current_user: User = Depends(get_current_user)):
    """
    Get the authenticated user's account (id, name, email, avatar, date).
    Used to refresh auth state on app load.
    """
    return UserResponse(
        id=current_user.id,
        name=current_user.name,
        email=current_user.email,
        avatar=current_user.avatar or "",
        date=current_user.created_at,
    )


@router.post("", response_model=TokenResponse)
def login(login_data: UserLogin, db: Session = Depends(get_db)):
    """
    Authenticate user and get access token

    - **email**: User's email address
    - **password**: User's password
    """
    validate(login_data.model_dump(), LOGIN_RULES)
    logger.info("Login attempt for email=%s", login_data.email)

    result = AuthService.login_user(db, login_data.email, login_data.password)
    if not result["success"]:
        logger.warning("Login failed email=%s reason=%s", login_data.email, result["message"])
        raise ApiError.field_errors([field_error(None, result["message"])])

    logger.info("User logged in user_id=%s", result["user"].id)
    return TokenResponse(token=result["token"])

"""
User registration endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.core.config import PASSWORD_MIN_LENGTH
from backend.app.core.dependencies import get_db
from backend.app.core.errors import ApiError
from backend.app.core.logging_config import get_logger
from backend.app.core.validation import email, field_error, min_length, required, validate
from backend.app.schemas.user import TokenResponse, UserRegister
from backend.app.services.auth_service import AuthService

logger = get_logger("api.users")
router = APIRouter()

REGISTER_RULES = (
    required("name", "Name is required"),
    email("email", "Please include a valid email"),
    min_length(
        "password",
        f"Please enter a password with {PASSWORD_MIN_LENGTH} or more characters",
        PASSWORD_MIN_LENGTH,
    ),
)


@router.post("", response_model=TokenResponse)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user account. Returns an access token (user is logged in after register).

    - **name**: Display name
    - **email**: Email address (must be unique; also used for the Gravatar avatar)
    - **password**: At least 6 characters
    """
    validate(user_data.model_dump(), REGISTER_RULES)
    logger.info("Registration attempt for email=%s", user_data.email)

    result = AuthService.register_user(db, user_data.name, user_data.email, user_data.password)
    if not result["success"]:
        logger.warning("Registration failed email=%s reason=%s", user_data.email, result["message"])
        raise ApiError.field_errors([field_error(None, result["message"])])

    logger.info("User registered user_id=%s email=%s", result["user"].id, user_data.email)
    return TokenResponse(token=result["token"])

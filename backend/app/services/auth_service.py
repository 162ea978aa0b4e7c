"""
Authentication service business logic
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.security import create_access_token, get_password_hash, gravatar_url, verify_password
from backend.app.models.user import User


def issue_token(user: User) -> str:
    return create_access_token(data={"sub": str(user.id), "email": user.email})


class AuthService:
    """Service for authentication operations"""

    @staticmethod
    def register_user(db: Session, name: str, email: str, password: str):
        """Register a new user and log them in"""
        existing_user = db.query(User).filter(User.email == email).first()
        if existing_user:
            return {"success": False, "message": "User already exists"}

        new_user = User(
            name=name,
            email=email,
            avatar=gravatar_url(email),
            hashed_password=get_password_hash(password),
        )
        try:
            db.add(new_user)
            db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration for the same email
            db.rollback()
            return {"success": False, "message": "User already exists"}
        db.refresh(new_user)

        return {
            "success": True,
            "user": new_user,
            "token": issue_token(new_user),
            "message": "User registered successfully",
        }

    @staticmethod
    def login_user(db: Session, email: str, password: str):
        """Authenticate user and return access token"""
        user = db.query(User).filter(User.email == email).first()
        if not user or not verify_password(password, user.hashed_password):
            return {"success": False, "message": "Invalid Credentials"}

        return {
            "success": True,
            "user": user,
            "token": issue_token(user),
            "message": "Login successful",
        }

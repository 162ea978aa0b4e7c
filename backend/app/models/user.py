"""
User database model - account credentials and avatar
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from backend.app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    avatar = Column(String(512), default="")  # Gravatar URL derived from email

    created_at = Column(DateTime, default=datetime.utcnow)

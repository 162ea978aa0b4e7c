"""
Profile database model - career/social fields with embedded experience and education lists
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.sqlite import JSON
from sqlalchemy.orm import relationship
from datetime import datetime

from backend.app.db.base import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    company = Column(String(255), nullable=True)
    website = Column(String(512), nullable=True)
    location = Column(String(255), nullable=True)
    status = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    githubusername = Column(String(100), nullable=True)

    skills = Column(JSON, default=list)  # ["node", "react", ...]
    social = Column(JSON, default=dict)  # {"twitter": "...", ...} only populated keys

    # Embedded lists, newest first. Each entry carries its own "_id".
    # Reassign (never mutate in place) so the JSON column is flagged dirty.
    experience = Column(JSON, default=list)
    education = Column(JSON, default=list)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", backref="profile")

"""
User Pydantic schemas for request/response validation
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRegister(BaseModel):
    """Schema for user registration. Field rules are checked in the route."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    """Schema for user login"""
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """User as returned to its owner - never includes the password hash"""
    id: int = Field(alias="_id")
    name: str
    email: str
    avatar: str = ""
    date: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True)


class TokenResponse(BaseModel):
    """Schema for token response"""
    token: str

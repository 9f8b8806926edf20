"""
Authentication schema models using Pydantic.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class SignupRequest(BaseModel):
    """Schema for account creation."""

    email: Optional[EmailStr] = None
    username: Optional[str] = Field(default=None, max_length=50)
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for the public user profile; never carries the password hash."""

    id: int
    email: str
    username: str
    created_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Schema for a successful login or signup."""

    success: bool = True
    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    message: str

"""
User profile routes.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from musicplayer.db.models import User
from musicplayer.db.session import get_db
from musicplayer.dependencies import get_current_user
from musicplayer.schemas.auth import UserResponse
from musicplayer.services import identity

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def read_current_user(user: User = Depends(get_current_user)):
    """Return the profile of the user holding the bearer token."""
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Retrieve a user's public profile (never the password hash)."""
    return identity.get_user(db, user_id)

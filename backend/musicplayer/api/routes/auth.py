"""
Authentication routes for signup and email/password login.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from musicplayer.core.security import create_access_token
from musicplayer.db.session import get_db
from musicplayer.schemas.auth import AuthResponse, LoginRequest, SignupRequest
from musicplayer.services import identity

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    """Create an account and return an access token for it."""
    user = identity.signup(db, data.email, data.username, data.password)
    return AuthResponse(
        user=user,
        access_token=create_access_token(data={"sub": str(user.id)}),
        message="Account created successfully",
    )


@router.post("/login", response_model=AuthResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """
    Log a user in.

    The password is checked against the stored bcrypt hash; unknown emails
    and wrong passwords both answer 401.
    """
    user = identity.login(db, data.email, data.password)
    return AuthResponse(
        user=user,
        access_token=create_access_token(data={"sub": str(user.id)}),
        message="Login successful",
    )

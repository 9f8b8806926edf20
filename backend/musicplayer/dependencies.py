"""
Dependency injection functions for the API.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from musicplayer.core.exceptions import Unauthorized
from musicplayer.core.security import verify_token
from musicplayer.db.models import User
from musicplayer.db.session import get_db


# Database dependency
db_dependency = get_db

# OAuth2 scheme for token extraction from the Authorization header
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(db_dependency),
) -> User:
    """
    Get the current authenticated user from a bearer token.

    Verifies the token and fetches the corresponding user from the database.
    """
    if not token:
        raise Unauthorized("Not authenticated")

    try:
        payload = verify_token(token)
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthorized("Invalid authentication credentials")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise Unauthorized("User not found")

    return user

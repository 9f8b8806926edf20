"""
User accounts: public profiles, signup and password login.
"""

import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from musicplayer.core.exceptions import (
    BadRequest,
    Conflict,
    NotFound,
    Unauthorized,
    store_errors,
)
from musicplayer.core.security import get_password_hash, verify_password
from musicplayer.db.models import User
from musicplayer.schemas.auth import UserResponse

logger = logging.getLogger(__name__)


def _normalise_email(email: str) -> str:
    return email.strip().lower()


def get_user(db: Session, user_id: int) -> UserResponse:
    """
    Return the public profile of a user.

    Raises:
        NotFound: If no user has this id
    """
    with store_errors("Failed to fetch user", logger):
        user = db.query(User).filter(User.id == user_id).first()

    if user is None:
        raise NotFound("User not found")
    return UserResponse.model_validate(user)


def signup(
    db: Session,
    email: Optional[str],
    username: Optional[str],
    password: Optional[str],
) -> UserResponse:
    """
    Create an account with a bcrypt-hashed password.

    Args:
        db: Database session
        email: Login identifier, stored lower-case
        username: Display name, unique across accounts
        password: Plain text password

    Returns:
        Public profile of the new user

    Raises:
        BadRequest: If a field is missing
        Conflict: If the email or username is already taken
    """
    if not email or not username or not username.strip() or not password:
        raise BadRequest("email, username and password required")

    email = _normalise_email(email)
    username = username.strip()

    with store_errors("Signup failed", logger, db):
        if db.query(User).filter(func.lower(User.email) == email).first():
            raise Conflict("This email is already registered")
        if db.query(User).filter(User.username == username).first():
            raise Conflict("This username is already taken")

        user = User(
            email=email,
            username=username,
            password_hash=get_password_hash(password),
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError as e:
            # A concurrent signup took the email or username after the checks
            db.rollback()
            logger.info(f"Signup lost a uniqueness race: {e}")
            raise Conflict("This email or username is already taken") from e
        db.refresh(user)

    logger.info(f"Created user {user.id}")
    return UserResponse.model_validate(user)


def login(db: Session, email: Optional[str], password: Optional[str]) -> UserResponse:
    """
    Check an email/password pair against the stored hash.

    Unknown emails and wrong passwords fail the same way so the response
    does not reveal which accounts exist.

    Raises:
        BadRequest: If email or password is missing
        Unauthorized: If the credentials do not match an account
    """
    if not email or not password:
        raise BadRequest("Email and password required")

    with store_errors("Login failed", logger):
        user = (
            db.query(User)
            .filter(func.lower(User.email) == _normalise_email(email))
            .first()
        )

    if user is None or not verify_password(password, user.password_hash):
        logger.info("Rejected login attempt")
        raise Unauthorized("Invalid credentials")

    return UserResponse.model_validate(user)

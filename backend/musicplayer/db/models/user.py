from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from musicplayer.db.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """User account; email is the login identifier."""

    email = Column(String(255), unique=True, index=True, nullable=False)
    username = Column(String(50), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    playlists = relationship(
        "Playlist", back_populates="user", cascade="all, delete-orphan"
    )

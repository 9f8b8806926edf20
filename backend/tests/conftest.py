"""
Test configuration and fixtures for pytest.
"""

import os

# Point the application at SQLite before it creates its engine
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from musicplayer.core.security import get_password_hash  # noqa: E402
from musicplayer.db.base import Base  # noqa: E402
from musicplayer.db.models import Artist, Song, User  # noqa: E402
from musicplayer.dependencies import db_dependency  # noqa: E402
from musicplayer.main import app  # noqa: E402

# One in-memory database shared by every connection of the test engine
DATABASE_URL = "sqlite://"

TEST_PASSWORD = "correct-horse-battery"

# Demo catalog shown by the player UI
DEMO_ARTISTS = [
    ("Ava Lumen", "Synth-pop producer from Lisbon."),
    ("Violet Drive", "Night-drive electronica duo."),
    ("Kairo", None),
    ("Sky Lanterns", "Dream-pop quartet."),
    ("North & Pine", "Folk duo."),
    ("Quiet Harbor", "Newly signed; no releases yet."),
]

DEMO_SONGS = [
    ("Neon Nights", "Ava Lumen", "3:21", "Synthpop", 2021),
    ("Midnight Engine", "Violet Drive", "4:08", "Electronic", 2020),
    ("Glass River", "Kairo", "2:59", "Ambient", 2019),
    ("Orbiting", "Sky Lanterns", "3:42", "Dream Pop", 2022),
    ("Paper Kites", "North & Pine", "3:10", "Folk", 2018),
]


class Catalog:
    """Seeded artists and songs, addressable by name/title."""

    def __init__(self, artists, songs):
        self.artists = artists
        self.songs = songs


@pytest.fixture(scope="session")
def test_engine():
    """Create an engine connected to the test database."""
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_engine):
    """Create a new database session for a test, rolled back afterwards."""
    connection = test_engine.connect()
    transaction = connection.begin()

    session_factory = sessionmaker(bind=connection)
    session = session_factory()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def client(db_session):
    """Create a test client with a session override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[db_dependency] = override_get_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def catalog(db_session):
    """Seed the demo artists and songs."""
    artists = {name: Artist(name=name, bio=bio) for name, bio in DEMO_ARTISTS}
    db_session.add_all(artists.values())
    db_session.flush()

    songs = {
        title: Song(
            title=title,
            artist_id=artists[artist].id,
            duration=duration,
            genre=genre,
            release_year=year,
        )
        for title, artist, duration, genre, year in DEMO_SONGS
    }
    db_session.add_all(songs.values())
    db_session.commit()

    return Catalog(artists, songs)


@pytest.fixture
def test_user(db_session):
    """Create a test user whose password is TEST_PASSWORD."""
    user = User(
        username="testuser",
        email="test@example.com",
        password_hash=get_password_hash(TEST_PASSWORD),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session):
    """A second account, for ownership checks."""
    user = User(
        username="otheruser",
        email="other@example.com",
        password_hash=get_password_hash("another-password"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user



@pytest.fixture
def test_password():
    """Plain text password of test_user."""
    return TEST_PASSWORD

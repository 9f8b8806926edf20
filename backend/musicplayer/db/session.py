"""
Database engine, connection pool and request-scoped sessions.
"""

import os
from typing import Any, Dict, Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

DATABASE_URL = os.getenv(
    "DATABASE_URL", "postgresql://postgres:postgres@db:5432/musicplayer"
)


def engine_options(url: str) -> Dict[str, Any]:
    """
    Keyword arguments for create_engine for the given URL.

    SQLite connections are shared with FastAPI's worker threads; every other
    dialect gets a bounded pool sized from DB_POOL_SIZE / DB_MAX_OVERFLOW.
    """
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
        "max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "10")),
        "pool_pre_ping": True,
    }


engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    """Yield a session for one request and always return its connection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

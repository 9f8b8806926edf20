"""
Health probe for the API and its database.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from musicplayer.db.session import get_db
from musicplayer.utils.datetime_helper import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Check that a pooled connection can be acquired and used.

    The session, and the connection it checked out, is released by get_db
    whatever the outcome.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": "disconnected", "error": str(e)},
        )

    return {
        "status": "ok",
        "database": "connected",
        "timestamp": utc_now().isoformat(),
    }

"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these; the handlers registered in ``musicplayer.main`` turn
them into ``{"error": message}`` JSON responses with the matching status code.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


class MusicPlayerError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(MusicPlayerError):
    """A required input is missing or blank."""

    status_code = 400


class Unauthorized(MusicPlayerError):
    """No account matches the presented credentials."""

    status_code = 401


class NotFound(MusicPlayerError):
    """An id has no matching row."""

    status_code = 404


class Conflict(MusicPlayerError):
    """A unique value (email, username) is already taken."""

    status_code = 409


class ServiceUnavailable(MusicPlayerError):
    """The store is unreachable or a query failed."""

    status_code = 500


@contextmanager
def store_errors(
    message: str, log: logging.Logger, db: Optional[Session] = None
) -> Iterator[None]:
    """
    Convert store failures inside the block into ServiceUnavailable.

    Args:
        message: Static message returned to the client
        log: Logger of the calling module
        db: Session to roll back when the block was writing

    Raises:
        ServiceUnavailable: If the block raised a SQLAlchemyError
    """
    try:
        yield
    except SQLAlchemyError as e:
        if db is not None:
            db.rollback()
        log.error(f"{message}: {e}")
        raise ServiceUnavailable(message) from e

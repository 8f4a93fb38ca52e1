"""
FastAPI dependency injection helpers.
"""
import logging
from typing import Generator

from frappuccino.db.database import get_db

logger = logging.getLogger(__name__)


def db_dependency() -> Generator:
    """Yield a database connection for the duration of a request."""
    logger.trace("Creating database dependency connection")
    with get_db() as conn:
        yield conn

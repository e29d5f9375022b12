"""Database connection setup.

This module opens the SQLAlchemy engine once at startup. No models are
defined yet: the user entity is passed through the API untouched and has no
storage schema.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from logic.config import load_config

logger = logging.getLogger(__name__)

engine: Optional[Engine] = None


def connect_database(database_url: Optional[str] = None) -> Optional[Engine]:
    """Create the engine and check that the database answers.

    A failure is only logged; the server keeps running without a database.

    Args:
        database_url: SQLAlchemy URL. Defaults to DATABASE_URL from config.

    Returns:
        The connected engine, or None if the connection failed.
    """
    global engine

    if database_url is None:
        database_url = load_config()["database_url"]

    try:
        candidate = create_engine(database_url)
        with candidate.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database connection failed: %s", e)
        engine = None
        return None

    engine = candidate
    logger.info("Database connected")
    return engine


def is_connected() -> bool:
    """Whether the startup connection succeeded."""
    return engine is not None


def close_database():
    """Dispose of the engine's connection pool."""
    global engine
    if engine is not None:
        engine.dispose()
        engine = None

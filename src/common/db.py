"""
Database connection utilities.
The engine is built lazily from `DATABASE_URL` so importing this module never touches the network.
Callers own the connections they open from it; the validators only borrow them.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from src.common.settings import get_settings


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Cached engine for the configured database."""

    settings = get_settings()
    return create_engine(settings.DATABASE_URL, pool_pre_ping=True, future=True)


def can_connect(engine: Engine | None = None) -> bool:
    """Return True if the database can be reached and queried."""

    target = engine or get_engine()
    try:
        with target.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False

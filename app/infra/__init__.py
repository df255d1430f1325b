"""Infrastructure - Database, logging."""

from app.infra.database import get_db_session, DatabaseSession, close_db_engine
from app.infra.logging import setup_logging, get_logger

__all__ = [
    "get_db_session",
    "DatabaseSession",
    "close_db_engine",
    "setup_logging",
    "get_logger",
]

"""Database initialization utilities."""
from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from pghostel.core.logging import get_logger
from pghostel.models import Base

logger = get_logger(__name__)


def init_db(engine: Engine) -> None:
    """
    Initialize the database by creating any missing tables.

    No migrations are defined; shape changes are limited to what
    ``create_all`` can add.
    """
    try:
        existing_tables = set(inspect(engine).get_table_names())
        Base.metadata.create_all(bind=engine)
        created = set(Base.metadata.tables) - existing_tables
        if created:
            logger.info(f"Created database tables: {', '.join(sorted(created))}")
        else:
            logger.info(f"Database already initialized with {len(existing_tables)} tables")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise


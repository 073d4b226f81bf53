from sqlalchemy import inspect
import logging

from pghub.database import engine, Base
import pghub.models  # noqa: F401  (registers the tables on Base.metadata)

logger = logging.getLogger(__name__)


def init_database(target_engine=None):
    """
    Create any missing tables.

    Args:
        target_engine: Engine to initialize; defaults to the application engine
    """
    target_engine = target_engine or engine
    existing = set(inspect(target_engine).get_table_names())

    Base.metadata.create_all(bind=target_engine)

    created = sorted(set(Base.metadata.tables) - existing)
    if created:
        logger.info(f"Created tables: {', '.join(created)}")
    else:
        logger.info("Database schema up to date")

from pathlib import Path
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from database import engine, Base
import models  # noqa: F401  registers the tables on Base.metadata
import logging

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(db_engine: Engine) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = db_engine.url
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def init_database(db_engine: Optional[Engine] = None) -> list:
    """
    Create any missing tables.

    Args:
        db_engine: Engine to initialise (defaults to the application engine)

    Returns:
        Names of the tables that were created
    """
    db_engine = db_engine or engine
    _ensure_sqlite_directory(db_engine)

    existing = set(inspect(db_engine).get_table_names())
    Base.metadata.create_all(bind=db_engine)
    created = [name for name in Base.metadata.tables if name not in existing]

    if created:
        logger.info(f"Created tables: {', '.join(created)}")
    else:
        logger.info("Database schema up to date")
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()

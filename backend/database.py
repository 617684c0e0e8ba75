from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config.app_config import APP_CONFIG

Base = declarative_base()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def create_db_engine(url: str, **kwargs) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections get WAL journaling, a busy timeout, enforced
    foreign keys and a Unicode-aware lower(). Extra keyword arguments are
    passed to create_engine.
    """
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
    else:
        kwargs.setdefault("pool_size", 20)
        kwargs.setdefault("max_overflow", 30)
        kwargs.setdefault("pool_recycle", 3600)  # Recycle connections after 1 hour
    kwargs.setdefault("pool_pre_ping", True)

    db_engine = create_engine(url, **kwargs)

    if is_sqlite:
        @event.listens_for(db_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            if ":memory:" not in url:
                cursor.execute("PRAGMA journal_mode=WAL")
                cursor.execute("PRAGMA synchronous=NORMAL")
            cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
            # SQLite's built-in lower() only folds ASCII
            dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)

    return db_engine


engine = create_db_engine(APP_CONFIG.database_url, echo=APP_CONFIG.sql_echo)

SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

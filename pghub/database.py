from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from pghub.config.app_config import DATABASE_URL, DB_ECHO, DB_POOL_SIZE, DB_MAX_OVERFLOW


def _engine_options(url: str) -> dict:
    """Pool options that apply to the configured backend."""
    options = {
        'echo': DB_ECHO,
        'pool_pre_ping': True,  # Verify connections are alive before using
        'pool_recycle': 3600,  # Recycle connections after 1 hour to prevent stale connections
    }
    parsed = make_url(url)
    if parsed.get_backend_name() == 'sqlite':
        options['connect_args'] = {'check_same_thread': False}
        if parsed.database in (None, '', ':memory:'):
            return options
    options['pool_size'] = DB_POOL_SIZE
    options['max_overflow'] = DB_MAX_OVERFLOW
    return options


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))


def enable_sqlite_foreign_keys(target_engine):
    """Turn on FK enforcement for every new SQLite connection of the engine."""
    if target_engine.dialect.name != 'sqlite':
        return

    @event.listens_for(target_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.close()


enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from realestate.core.config import get_database_url
from realestate.core.db import register_query_timing

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()

# Internal lazy globals
_engine = None
_SessionLocal = None
_database_url = None

def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores ON DELETE rules unless foreign keys are switched on per connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

def get_engine():
    """Return a cached SQLAlchemy engine, creating it from DATABASE_URL on
    first call. This allows tests to set DATABASE_URL before the engine is
    constructed."""
    global _engine, _SessionLocal, _database_url
    database_url = get_database_url()
    if _engine is not None and _database_url == database_url:
        return _engine

    if _engine is not None:
        _engine.dispose()
        _SessionLocal = None

    url = make_url(database_url)
    if url.drivername.startswith("postgres"):
        _engine = create_engine(
            database_url,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
            connect_args={
                "application_name": "realestate_backend",
                "connect_timeout": 10,
            },
            echo=False,
        )
    elif url.drivername.startswith("sqlite"):
        if ":memory:" in database_url or not url.database:
            # Single shared in-memory database so DDL persists across sessions
            _engine = create_engine(
                database_url,
                echo=False,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            _engine = create_engine(
                database_url, echo=False, connect_args={"check_same_thread": False}
            )
        _enable_sqlite_foreign_keys(_engine)
    else:
        _engine = create_engine(database_url, echo=False)

    register_query_timing(_engine)
    logger.debug(
        "SQLAlchemy engine created",
        extra={
            "context": {
                "url": _engine.url.render_as_string(hide_password=True),
                "dialect": _engine.dialect.name,
            }
        },
    )
    _database_url = database_url
    return _engine

def get_sessionmaker():
    """Return a cached sessionmaker bound to the lazy engine."""
    global _SessionLocal
    engine = get_engine()
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
        )
    return _SessionLocal

def SessionLocal():
    """Calling SessionLocal() returns a new Session bound to the current engine."""
    return get_sessionmaker()()

def create_tables():
    """Create all tables in the database using the lazy engine."""
    # Ensure models are imported so Base.metadata is populated
    from realestate.db import base  # noqa: F401

    Base.metadata.create_all(bind=get_engine())

def drop_tables():
    """Drop all tables (used by tests and the reset CLI command)."""
    from realestate.db import base  # noqa: F401

    Base.metadata.drop_all(bind=get_engine())

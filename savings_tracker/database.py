import os
import logging
from datetime import timezone

from fastapi import Request

from sqlalchemy import create_engine, event, DateTime
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator

logger = logging.getLogger(__name__)

Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """Stored as naive UTC, read back as aware UTC.

    SQLite keeps no offset, so values are converted before they are written.
    """
    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Engine + session factory for one database URL.

    Built once at startup and handed to the app; request handlers get
    sessions through ``get_db``.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url

        # Only use connect_args if we are using SQLite
        engine_args = {}
        if url.startswith("sqlite"):
            engine_args["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # Keep a single connection so every session sees the same in-memory db
                engine_args["poolclass"] = StaticPool
        else:
            # Production settings for PostgreSQL
            engine_args.update({
                "pool_size": 5,
                "max_overflow": 10,
                "pool_timeout": 30,
                "pool_recycle": 1800,
            })

        try:
            self.engine = create_engine(url, echo=echo, **engine_args)
        except Exception as e:
            logger.error(f"Failed to create engine: {e}")
            raise

        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self):
        return self.SessionLocal()

    def init_db(self):
        """Create the data/ directory for file-backed SQLite, then create all tables."""
        if self.url.startswith("sqlite:///") and self.url != "sqlite:///:memory:":
            directory = os.path.dirname(self.url[len("sqlite:///"):])
            if directory:
                os.makedirs(directory, exist_ok=True)

        # Import all models so they register with Base.metadata
        from savings_tracker.models.goal import Goal  # noqa: F401
        from savings_tracker.models.contribution import Contribution  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database initialized successfully.")

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request):
    """FastAPI dependency — yields a database session and closes it after use."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()

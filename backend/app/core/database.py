from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from ..config import settings
import logging

logger = logging.getLogger(__name__)

# SQLite needs cross-thread access for FastAPI's threadpool and a lock timeout
sqlite_connect_args = {}
if "sqlite" in settings.database_url:
    sqlite_connect_args = {
        "check_same_thread": False,
        "timeout": 30.0,
    }

engine = create_engine(
    settings.database_url,
    connect_args=sqlite_connect_args,
    echo=settings.debug,
    pool_pre_ping=True,
)

if "sqlite" in settings.database_url:
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        """Enable WAL mode and set busy timeout for SQLite connections"""
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA busy_timeout=30000")
        cursor.close()
        logger.debug("SQLite WAL mode and busy timeout enabled")

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables"""
    # Register every model on Base.metadata before creating tables
    from .. import models  # noqa: F401

    logger.info("Initializing database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized successfully")

"""Database connection and session management."""
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from uxscore.config import settings

if settings.database_url.startswith("sqlite"):
    # Single shared connection so in-memory databases survive across sessions
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    # One pool shared by every request, identity lookups included
    engine = create_engine(
        settings.database_url,
        pool_size=20,
        max_overflow=10,
        pool_pre_ping=True,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(create_schema: bool = True) -> None:
    """
    Create tables when asked, then seed reference data.

    Canonical categories are only seeded together with schema creation, so
    categories an administrator deleted stay deleted across restarts.
    Migrated databases get them from the initial Alembic revision.
    """
    # Imported here so every model is registered on Base.metadata
    from uxscore import models  # noqa: F401
    from uxscore.services.seed import seed_all

    if create_schema:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_all(db, include_categories=create_schema)
    finally:
        db.close()

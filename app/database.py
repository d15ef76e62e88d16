# app/database.py
"""
Database connection, session management, and table creation.
Uses SQLAlchemy with PostgreSQL (SQLite is accepted for local runs).
All models are auto-imported here so create_tables() creates every table in one call.
"""

from typing import Optional

from fastapi import Header
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings


def _engine_kwargs() -> dict:
    if settings.is_sqlite:
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }


engine = create_engine(settings.DATABASE_URL, **_engine_kwargs())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores REFERENCES clauses unless this pragma is on for every connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


if settings.is_sqlite:
    event.listen(engine, "connect", enable_sqlite_foreign_keys)


@event.listens_for(SessionLocal, "after_begin")
def apply_statement_timeout(session, transaction, connection):
    """
    Bound every statement of the transaction on PostgreSQL. The server cancels
    a statement that runs past the limit and the whole transaction rolls back.
    """
    timeout_ms = session.info.get("statement_timeout_ms") or 0
    if timeout_ms > 0 and connection.dialect.name == "postgresql":
        connection.exec_driver_sql(f"SET LOCAL statement_timeout = {int(timeout_ms)}")


def get_db(x_request_timeout_ms: Optional[int] = Header(default=None, ge=1)):
    """
    One session per request. X-Request-Timeout-Ms overrides DB_STATEMENT_TIMEOUT_MS
    for that request's transactions.
    """
    db = SessionLocal()
    db.info["statement_timeout_ms"] = x_request_timeout_ms or settings.DB_STATEMENT_TIMEOUT_MS
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """Create any missing tables. Models are imported so they register on Base.metadata."""
    from app.models.user import User                           # noqa
    from app.models.forklift import Forklift                   # noqa
    from app.models.checklist_item import ChecklistItem        # noqa
    from app.models.daily_inspection import DailyInspection    # noqa
    from app.models.inspection_result import InspectionResult  # noqa

    Base.metadata.create_all(bind=engine)

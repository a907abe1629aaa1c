"""PostgreSQL connection and session management."""

import logging
import re
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.core.errors import InternalError

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# SQLite names the offending columns instead of the constraint.
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (?P<table>\w+)\.(?P<column>\w+)")


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


def violated_constraint(exc: IntegrityError) -> str | None:
    """
    Name of the constraint behind an IntegrityError, taken from the driver's
    diagnostics (psycopg2 diag.constraint_name).

    SQLite only reports "table.column"; that is mapped onto the Postgres
    default "<table>_<column>_key" naming so callers compare one set of names.
    """
    diag = getattr(exc.orig, "diag", None)
    name = getattr(diag, "constraint_name", None)
    if name:
        return name
    match = _SQLITE_UNIQUE.search(str(exc.orig))
    if match:
        return f"{match['table']}_{match['column']}_key"
    return None


@contextmanager
def query_errors(db: Session, operation: str) -> Iterator[None]:
    """
    Translate database failures inside the block into InternalError.

    The session is rolled back and the original error logged with traceback;
    the client only sees the generic server error message.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("DB query error on %s", operation)
        raise InternalError() from e

"""SQLAlchemy declarative Base shared by the account, credential and book tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; Base.metadata is the target for Alembic autogenerate."""

"""SQLAlchemy ORM models."""

from app.models.account import Account, AccountCredential
from app.models.base import Base
from app.models.book import Book

__all__ = ["Account", "AccountCredential", "Base", "Book"]

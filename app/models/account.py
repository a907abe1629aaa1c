"""ORM models for user accounts and their stored credentials."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint

from app.models.base import Base

# Constraint names match Postgres' defaults so IntegrityErrors can be classified by name.
ACCOUNT_USERNAME_KEY = "account_username_key"
ACCOUNT_EMAIL_KEY = "account_email_key"


class Account(Base):
    """
    Registered user. Created on registration and not mutated afterwards.

    account_role: integer 1..5
    """

    __tablename__ = "account"
    __table_args__ = (
        UniqueConstraint("username", name=ACCOUNT_USERNAME_KEY),
        UniqueConstraint("email", name=ACCOUNT_EMAIL_KEY),
    )

    account_id = Column(Integer, primary_key=True, autoincrement=True)
    firstname = Column(String(255), nullable=False)
    lastname = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(255), nullable=True)
    account_role = Column(Integer, nullable=False)


class AccountCredential(Base):
    """Salt and salted hash for one account (one-to-one with Account)."""

    __tablename__ = "account_credential"

    credential_id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(
        Integer,
        ForeignKey("account.account_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    salted_hash = Column(String(255), nullable=False)
    salt = Column(String(255), nullable=False)

"""ORM model for the book catalog."""

from sqlalchemy import BigInteger, Column, Float, Integer, String, Text, UniqueConstraint

from app.models.base import Base

BOOKS_ISBN13_KEY = "books_isbn13_key"
BOOKS_TITLE_KEY = "books_title_key"


class Book(Base):
    """One catalog entry; isbn13 and title are each unique."""

    __tablename__ = "books"
    __table_args__ = (
        UniqueConstraint("isbn13", name=BOOKS_ISBN13_KEY),
        UniqueConstraint("title", name=BOOKS_TITLE_KEY),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    isbn13 = Column(BigInteger, nullable=False)
    authors = Column(Text, nullable=True, index=True)
    publication_year = Column(Integer, nullable=True)
    title = Column(Text, nullable=False)
    rating_avg = Column(Float, nullable=True)
    rating_count = Column(Integer, nullable=True)
    rating_1_star = Column(Integer, nullable=True)
    rating_2_star = Column(Integer, nullable=True)
    rating_3_star = Column(Integer, nullable=True)
    rating_4_star = Column(Integer, nullable=True)
    rating_5_star = Column(Integer, nullable=True)
    image_url = Column(Text, nullable=True)
    image_small_url = Column(Text, nullable=True)

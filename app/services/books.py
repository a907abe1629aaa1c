"""Book catalog operations: one statement per operation, typed errors for the routes."""

import logging
from collections.abc import Iterable

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import query_errors, violated_constraint
from app.core.errors import ConflictError, InternalError, NotFoundError, ValidationError
from app.models import Book
from app.models.book import BOOKS_ISBN13_KEY, BOOKS_TITLE_KEY
from app.schemas.library import AddBookRequest, BookEntry, UpdateRatingsRequest
from app.services.validation import (
    is_non_negative_int,
    is_number_provided,
    is_string_provided,
    is_valid_isbn13,
    is_valid_publication_year,
    is_valid_title,
    to_number,
)

logger = logging.getLogger(__name__)

INVALID_ISBN13 = "Invalid or missing isbn13 - please refer to documentation"
INVALID_TITLE = "Invalid or missing Title - please refer to documentation"
INVALID_AUTHOR_QUERY = "Invalid or missing author - please refer to documentation"
INVALID_AUTHOR_PARAM = "Invalid or missing Author - please refer to documentation"
INVALID_PUBLICATION_YEAR = "Invalid or missing publication_year - please refer to documentation"
INVALID_RATING_AVG = "Invalid or missing rating_avg - please refer to documentation"

INVALID_BOOK_TITLE = "Invalid or missing book title - please refer to documentation"
INVALID_BOOK_AUTHOR = "Invalid or missing book author - please refer to documentation"
INVALID_BOOK_YEAR = "Invalid or missing publication year - please refer to documentation"
INVALID_SMALL_IMAGE = "Invalid or missing small image url - please refer to the documentation"
INVALID_LARGE_IMAGE = "Invalid or missing large image url - please refer to the documentation"
INVALID_RATING_COUNTS = "Rating counts must be non-negative integers"
MISSING_RATING_COUNTS = "At least one rating count must be provided"

ISBN13_EXISTS = "isbn13 already exists"
TITLE_EXISTS = "Title already exists"

NO_BOOKS = "Book not found"
BOOK_TITLE_NOT_FOUND = "Book title not found"
NO_BOOK_FOR_ISBN13 = "No book associated with this isbn13 was found"
NO_BOOK_FOR_TITLE = "No book associated with this title was found"
NO_BOOK_FOR_AUTHOR = "No book associated with this author was found"
NO_BOOK_FOR_YEAR = "No book associated with this publication year was found"
NO_BOOK_FOR_RATING_AVG = "No book associated with this rating_avg was found"
RATINGS_UPDATED = "Book's ratings have been updated"

_CONFLICT_MESSAGES = {
    BOOKS_ISBN13_KEY: ISBN13_EXISTS,
    BOOKS_TITLE_KEY: TITLE_EXISTS,
}

STAR_COLUMNS = ("rating_1_star", "rating_2_star", "rating_3_star", "rating_4_star", "rating_5_star")
RATING_COLUMNS = ("rating_count", *STAR_COLUMNS)


def _rating_count(value: object) -> int | None:
    """A provided rating count as an int; None when absent. Fractions and negatives are rejected."""
    if not is_number_provided(value):
        return None
    number = to_number(value)
    if not (number.is_integer() and number >= 0):
        raise ValidationError(INVALID_RATING_COUNTS)
    return int(number)


def average_rating(body: AddBookRequest) -> float | None:
    """
    Weighted average of the star counts over totalRatings.

    Only computed when all six numbers are given; None otherwise or when there
    are no ratings. Counts that are negative or fractional are rejected.
    """
    counts = [
        _rating_count(c)
        for c in (
            body.total_ratings,
            body.one_star,
            body.two_star,
            body.three_star,
            body.four_star,
            body.five_star,
        )
    ]
    if any(c is None for c in counts):
        return None
    total, one, two, three, four, five = counts
    if total == 0:
        return None
    return (five * 5 + four * 4 + three * 3 + two * 2 + one) / total


def _entries(books: Iterable[Book]) -> list[BookEntry]:
    """Snapshot rows as schemas; deleted instances cannot be reloaded after commit."""
    return [BookEntry.model_validate(book) for book in books]


def validate_new_book(body: AddBookRequest) -> None:
    """Check required book fields in order; first failure raises ValidationError."""
    if not is_valid_isbn13(body.isbn):
        raise ValidationError(INVALID_ISBN13)
    if not is_valid_title(body.title):
        raise ValidationError(INVALID_BOOK_TITLE)
    if not is_string_provided(body.author):
        raise ValidationError(INVALID_BOOK_AUTHOR)
    if not is_valid_publication_year(body.publication_year):
        raise ValidationError(INVALID_BOOK_YEAR)
    if not is_string_provided(body.image_small_url):
        raise ValidationError(INVALID_SMALL_IMAGE)
    if not is_string_provided(body.image_large_url):
        raise ValidationError(INVALID_LARGE_IMAGE)


def add_book(db: Session, body: AddBookRequest) -> Book:
    """Insert a book; duplicate isbn13 or title becomes a ConflictError."""
    validate_new_book(body)
    book = Book(
        isbn13=int(body.isbn),
        authors=body.author,
        publication_year=int(body.publication_year),
        title=body.title,
        rating_avg=average_rating(body),
        rating_count=_rating_count(body.total_ratings),
        rating_1_star=_rating_count(body.one_star),
        rating_2_star=_rating_count(body.two_star),
        rating_3_star=_rating_count(body.three_star),
        rating_4_star=_rating_count(body.four_star),
        rating_5_star=_rating_count(body.five_star),
        image_url=body.image_large_url,
        image_small_url=body.image_small_url,
    )
    db.add(book)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        message = _CONFLICT_MESSAGES.get(violated_constraint(e))
        if message is not None:
            raise ConflictError(message) from e
        logger.exception("DB query error on add book")
        raise InternalError() from e
    with query_errors(db, "add book"):
        db.refresh(book)
    return book


def list_books(db: Session) -> list[Book]:
    with query_errors(db, "retrieve all books"):
        books = list(db.scalars(select(Book).order_by(Book.id)))
    if not books:
        raise NotFoundError(NO_BOOKS)
    return books


def get_by_isbn13(db: Session, isbn13: str) -> Book:
    if not is_valid_isbn13(isbn13):
        raise ValidationError(INVALID_ISBN13)
    with query_errors(db, "get by isbn13"):
        book = db.scalars(select(Book).where(Book.isbn13 == int(isbn13))).first()
    if book is None:
        raise NotFoundError(NO_BOOK_FOR_ISBN13)
    return book


def get_by_title(db: Session, title: str) -> Book:
    if not is_valid_title(title):
        raise ValidationError(INVALID_TITLE)
    with query_errors(db, "get by title"):
        book = db.scalars(select(Book).where(Book.title == title)).first()
    if book is None:
        raise NotFoundError(NO_BOOK_FOR_TITLE)
    return book


def find_by_authors(db: Session, authors: str | None) -> list[Book]:
    """Books whose authors field contains `authors` as a substring."""
    if not is_string_provided(authors):
        raise ValidationError(INVALID_AUTHOR_QUERY)
    with query_errors(db, "get by author"):
        books = list(
            db.scalars(select(Book).where(Book.authors.contains(authors, autoescape=True)).order_by(Book.id))
        )
    if not books:
        raise NotFoundError(NO_BOOK_FOR_AUTHOR)
    return books


def find_by_publication_year(db: Session, year: str | None) -> list[Book]:
    if not is_valid_publication_year(year):
        raise ValidationError(INVALID_PUBLICATION_YEAR)
    with query_errors(db, "get by publication_year"):
        books = list(db.scalars(select(Book).where(Book.publication_year == int(year)).order_by(Book.id)))
    if not books:
        raise NotFoundError(NO_BOOK_FOR_YEAR)
    return books


def find_by_rating_avg(db: Session, rating_avg: str | None) -> list[Book]:
    if not is_number_provided(rating_avg):
        raise ValidationError(INVALID_RATING_AVG)
    with query_errors(db, "get by rating_avg"):
        books = list(
            db.scalars(select(Book).where(Book.rating_avg == to_number(rating_avg)).order_by(Book.id))
        )
    if not books:
        raise NotFoundError(NO_BOOK_FOR_RATING_AVG)
    return books


def search_books(
    db: Session,
    authors: str | None = None,
    publication_year: str | None = None,
    rating_avg: str | None = None,
) -> list[Book]:
    """
    Dispatch GET /library by which query parameter is present: authors alone,
    publication_year alone, otherwise rating_avg (so no parameters at all is
    reported as a missing rating_avg).
    """
    if authors and not rating_avg and not publication_year:
        return find_by_authors(db, authors)
    if publication_year and not rating_avg and not authors:
        return find_by_publication_year(db, publication_year)
    return find_by_rating_avg(db, rating_avg)


def validate_ratings_update(body: UpdateRatingsRequest) -> dict[str, int]:
    """Return the rating columns to set; at least one star count is required."""
    if not body.title or all(getattr(body, column) is None for column in STAR_COLUMNS):
        raise ValidationError(MISSING_RATING_COUNTS)
    values: dict[str, int] = {}
    for column in RATING_COLUMNS:
        value = getattr(body, column)
        if value is None:
            continue
        if not is_non_negative_int(value):
            raise ValidationError(INVALID_RATING_COUNTS)
        values[column] = int(value)
    return values


def update_ratings(db: Session, body: UpdateRatingsRequest) -> None:
    """
    Set the given rating counts on the book with `title`.

    The title is looked up before the counts are validated, so an unknown
    title is reported as not found even when the counts are also invalid.
    """
    exists = False
    if is_string_provided(body.title):
        with query_errors(db, "update ratings lookup"):
            exists = db.scalars(select(Book.id).where(Book.title == body.title)).first() is not None
    if not exists:
        raise NotFoundError(BOOK_TITLE_NOT_FOUND)

    values = validate_ratings_update(body)
    with query_errors(db, "update ratings"):
        db.execute(update(Book).where(Book.title == body.title).values(**values))
        db.commit()


def delete_by_isbn13(db: Session, isbn13: str) -> list[BookEntry]:
    if not is_valid_isbn13(isbn13):
        raise ValidationError(INVALID_ISBN13)
    with query_errors(db, "delete by isbn13"):
        deleted = _entries(db.scalars(delete(Book).where(Book.isbn13 == int(isbn13)).returning(Book)))
        db.commit()
    if not deleted:
        raise NotFoundError(f"No book for isbn13 {isbn13} found")
    return deleted


def delete_by_author(db: Session, author: str) -> list[BookEntry]:
    if not is_string_provided(author):
        raise ValidationError(INVALID_AUTHOR_PARAM)
    with query_errors(db, "delete by author"):
        deleted = _entries(db.scalars(delete(Book).where(Book.authors == author).returning(Book)))
        db.commit()
    if not deleted:
        raise NotFoundError(NO_BOOK_FOR_AUTHOR)
    return deleted

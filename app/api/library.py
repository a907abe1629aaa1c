"""Book catalog routes; mounted open under /library and token-protected under /c/library."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.library import (
    AddBookRequest,
    BookEntry,
    EntriesResponse,
    EntryResponse,
    MessageResponse,
    UpdateRatingsRequest,
)
from app.services import books

router = APIRouter()


@router.post("/add", response_model=EntryResponse, status_code=status.HTTP_201_CREATED)
def add_book(
    body: AddBookRequest,
    db: Annotated[Session, Depends(get_db)],
) -> EntryResponse:
    """
    Add a book to the catalog.

    Required: **ISBN** (13 digits, unique), **title** (unique), **author**,
    **publicationYear**, **imageSmallURL**, **imageLargeURL**. When
    **totalRatings** and **oneStar** through **fiveStar** are all given, the
    average rating is computed from them.
    """
    book = books.add_book(db, body)
    return EntryResponse(entry=BookEntry.model_validate(book))


@router.get("/retrieve", response_model=EntriesResponse)
def retrieve_all(db: Annotated[Session, Depends(get_db)]) -> EntriesResponse:
    """Return every book in the catalog."""
    return EntriesResponse(entries=[BookEntry.model_validate(b) for b in books.list_books(db)])


@router.get("/isbn13/{isbn13}", response_model=EntryResponse)
def get_by_isbn13(isbn13: str, db: Annotated[Session, Depends(get_db)]) -> EntryResponse:
    return EntryResponse(entry=BookEntry.model_validate(books.get_by_isbn13(db, isbn13)))


@router.get("/title/{title}", response_model=EntryResponse)
def get_by_title(title: str, db: Annotated[Session, Depends(get_db)]) -> EntryResponse:
    return EntryResponse(entry=BookEntry.model_validate(books.get_by_title(db, title)))


@router.get("", response_model=EntriesResponse)
@router.get("/", response_model=EntriesResponse, include_in_schema=False)
def search(
    db: Annotated[Session, Depends(get_db)],
    authors: str | None = None,
    publication_year: str | None = None,
    rating_avg: str | None = None,
) -> EntriesResponse:
    """
    Search by exactly one of **authors** (substring), **publication_year**
    (four digits) or **rating_avg** (exact).
    """
    found = books.search_books(
        db,
        authors=authors,
        publication_year=publication_year,
        rating_avg=rating_avg,
    )
    return EntriesResponse(entries=[BookEntry.model_validate(b) for b in found])


@router.put("/update/ratings", response_model=MessageResponse)
def update_ratings(
    body: UpdateRatingsRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Set one or more star-rating counts on the book with the given **title**."""
    books.update_ratings(db, body)
    return MessageResponse(message=books.RATINGS_UPDATED)


@router.delete("/remove/ISBN/{isbn13}", response_model=EntriesResponse)
def remove_by_isbn13(isbn13: str, db: Annotated[Session, Depends(get_db)]) -> EntriesResponse:
    """Delete the book with this isbn13 and return it."""
    return EntriesResponse(entries=books.delete_by_isbn13(db, isbn13))


@router.delete("/remove/author/{author}", response_model=EntriesResponse)
def remove_by_author(author: str, db: Annotated[Session, Depends(get_db)]) -> EntriesResponse:
    """Delete every book whose authors field equals **author** and return them."""
    return EntriesResponse(entries=books.delete_by_author(db, author))

"""Pydantic schemas for the book catalog endpoints."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BookEntry(BaseModel):
    """A book as returned by lookups, searches and deletes."""

    model_config = ConfigDict(from_attributes=True)

    isbn13: int
    authors: str | None = None
    publication_year: int | None = None
    title: str
    rating_avg: float | None = None
    rating_count: int | None = None
    rating_1_star: int | None = None
    rating_2_star: int | None = None
    rating_3_star: int | None = None
    rating_4_star: int | None = None
    rating_5_star: int | None = None
    image_url: str | None = None
    image_small_url: str | None = None


class AddBookRequest(BaseModel):
    """
    Body for POST /library/add. Field names follow the public API; values are
    checked field by field so each failure gets its own message.
    """

    model_config = ConfigDict(extra="ignore")

    isbn: Any = Field(default=None, validation_alias=AliasChoices("ISBN", "isbn"))
    title: Any = None
    author: Any = None
    publication_year: Any = Field(default=None, alias="publicationYear")
    image_small_url: Any = Field(default=None, alias="imageSmallURL")
    image_large_url: Any = Field(default=None, alias="imageLargeURL")
    total_ratings: Any = Field(default=None, alias="totalRatings")
    one_star: Any = Field(default=None, alias="oneStar")
    two_star: Any = Field(default=None, alias="twoStar")
    three_star: Any = Field(default=None, alias="threeStar")
    four_star: Any = Field(default=None, alias="fourStar")
    five_star: Any = Field(default=None, alias="fiveStar")


class UpdateRatingsRequest(BaseModel):
    """Body for PUT /library/update/ratings; omitted counts are left unchanged."""

    model_config = ConfigDict(extra="ignore")

    title: Any = None
    rating_count: Any = None
    rating_1_star: Any = None
    rating_2_star: Any = None
    rating_3_star: Any = None
    rating_4_star: Any = None
    rating_5_star: Any = None


class EntryResponse(BaseModel):
    entry: BookEntry


class EntriesResponse(BaseModel):
    entries: list[BookEntry]


class MessageResponse(BaseModel):
    """Plain confirmation or error body."""

    message: str

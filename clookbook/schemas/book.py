"""
Book Pydantic Schemas

Validation rules mirror what the reading tracker has always accepted:
- title is required and trimmed
- totalPages must be a finite number of at least one page; fractions are floored
- startedAt accepts an ISO date/datetime, and null or "" clears it
"""

import math
from datetime import UTC, datetime

from pydantic import ConfigDict, Field, field_validator

from clookbook.schemas.common import MAX_INT, CamelModel
from clookbook.schemas.reading_session import ReadingSessionResponse

TITLE_REQUIRED_MESSAGE = "Title is required"
TOTAL_PAGES_MESSAGE = "totalPages must be a positive number"
STARTED_AT_MESSAGE = "startedAt must be a valid date"


def _clean_title(v: str | None) -> str:
    if v is None or not v.strip():
        raise ValueError(TITLE_REQUIRED_MESSAGE)
    return v.strip()


class BookCreate(CamelModel):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "The Left Hand of Darkness"
    }
    """

    title: str | None = Field(
        default=None,
        max_length=500,
        validate_default=True,
        description="Book title",
        examples=["The Left Hand of Darkness"],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str | None) -> str:
        return _clean_title(v)


class BookUpdate(CamelModel):
    """
    Schema for partially updating a book.

    Only the fields present in the request body are applied; use
    model_dump(exclude_unset=True) to get them.
    """

    title: str | None = Field(default=None, max_length=500, description="Book title")

    total_pages: int | None = Field(
        default=None,
        description="Number of pages (positive, fractions are floored)",
        examples=[328],
    )

    started_at: datetime | None = Field(
        default=None,
        description="When reading started; null or empty string clears it",
        examples=["2024-01-15", "2024-01-15T20:30:00Z"],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str | None) -> str:
        return _clean_title(v)

    @field_validator("total_pages", mode="before")
    @classmethod
    def total_pages_must_be_positive(cls, v) -> int:
        if isinstance(v, bool):
            raise ValueError(TOTAL_PAGES_MESSAGE)
        try:
            n = float(v)
        except (TypeError, ValueError):
            raise ValueError(TOTAL_PAGES_MESSAGE) from None
        if not math.isfinite(n) or n < 1 or n >= MAX_INT + 1:
            raise ValueError(TOTAL_PAGES_MESSAGE)
        return math.floor(n)

    @field_validator("started_at", mode="before")
    @classmethod
    def parse_started_at(cls, v):
        if v is None or v == "":
            return None
        if isinstance(v, str):
            try:
                return datetime.fromisoformat(v.strip())
            except ValueError:
                raise ValueError(STARTED_AT_MESSAGE) from None
        return v

    @field_validator("started_at")
    @classmethod
    def started_at_in_utc(cls, v: datetime | None) -> datetime | None:
        # Dates without an offset are taken as UTC
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class BookResponse(CamelModel):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")
    owner_id: int = Field(..., description="Owning user id")
    title: str = Field(..., description="Book title")
    total_pages: int | None = Field(default=None, description="Number of pages")
    started_at: datetime | None = Field(default=None, description="When reading started")
    created_at: datetime = Field(..., description="When the book was added")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "ownerId": 1,
                "title": "The Left Hand of Darkness",
                "totalPages": 304,
                "startedAt": "2024-01-15T00:00:00Z",
                "createdAt": "2024-01-15T10:30:00Z",
            }
        },
    )


class BookDetailResponse(CamelModel):
    """A book together with its most recent reading session."""

    book: BookResponse
    last_session: ReadingSessionResponse | None = Field(
        default=None,
        description="Newest session for the book, null if none were logged",
    )

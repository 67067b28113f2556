"""
Reading Session Pydantic Schemas
"""

from datetime import datetime

from pydantic import Field

from clookbook.schemas.common import MAX_BIGINT, MAX_INT, CamelModel


class ReadingSessionCreate(CamelModel):
    """
    Schema for logging a reading session.

    All fields are optional; the client may log a session before it knows
    where the reader stopped.

    Example request body:
    {
        "startPage": 10,
        "currentPage": 42,
        "elapsedMs": 1800000
    }
    """

    start_page: int | None = Field(default=None, ge=0, le=MAX_INT, description="Page the reader started on")
    current_page: int | None = Field(default=None, ge=0, le=MAX_INT, description="Page the reader stopped on")
    elapsed_ms: int | None = Field(default=None, ge=0, le=MAX_BIGINT, description="Reading time in milliseconds")


class ReadingSessionResponse(CamelModel):
    """Schema for reading session responses."""

    id: int = Field(..., description="Unique identifier")
    book_id: int = Field(..., description="Book the session belongs to")
    start_page: int | None = None
    current_page: int | None = None
    elapsed_ms: int | None = None
    created_at: datetime = Field(..., description="When the session was logged")

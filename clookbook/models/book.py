"""
Book Model

A book a user is reading. Every book belongs to exactly one owner, and all
access to it goes through an ownership filter (see services.books).
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clookbook.database import Base

if TYPE_CHECKING:
    from clookbook.models.reading_session import ReadingSession
    from clookbook.models.user import User


class Book(Base):
    """
    Book model for a reader's personal shelf.

    Table: books

    Fields:
    - owner_id: The user who created the book (required)
    - title: Book title (required, stored trimmed)
    - total_pages: Page count, filled in later by the reader
    - started_at: When the reader started the book

    Relationships:
    - owner: Many-to-One with User
    - sessions: One-to-Many with ReadingSession
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning user"
    )

    title: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Book title"
    )

    total_pages: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        default=None,
        comment="Number of pages in the book"
    )

    started_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="When the reader started the book"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    owner: Mapped["User"] = relationship("User", back_populates="books")

    sessions: Mapped[list["ReadingSession"]] = relationship(
        "ReadingSession",
        back_populates="book",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, owner_id={self.owner_id}, title='{self.title}')"

"""
Reading Session Model

One timed reading sitting logged against a book.
"""

from datetime import UTC, datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clookbook.database import Base


class ReadingSession(Base):
    """
    Reading session model.

    Attributes:
        id: Primary key
        book_id: Foreign key to books table
        start_page: Page the reader started on
        current_page: Page the reader stopped on
        elapsed_ms: Time spent reading, in milliseconds
        created_at: When the session was logged
    """

    __tablename__ = "reading_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    book_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    start_page: Mapped[int | None] = mapped_column(Integer, nullable=True)
    current_page: Mapped[int | None] = mapped_column(Integer, nullable=True)
    elapsed_ms: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    book = relationship("Book", back_populates="sessions")

    __table_args__ = (
        CheckConstraint("start_page IS NULL OR start_page >= 0", name="ck_session_start_page"),
        CheckConstraint("current_page IS NULL OR current_page >= 0", name="ck_session_current_page"),
        CheckConstraint("elapsed_ms IS NULL OR elapsed_ms >= 0", name="ck_session_elapsed_ms"),
    )

    def __repr__(self) -> str:
        return (
            f"<ReadingSession(id={self.id}, book_id={self.book_id}, "
            f"pages={self.start_page}->{self.current_page}, elapsed_ms={self.elapsed_ms})>"
        )

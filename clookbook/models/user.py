"""
User Model

Credential store for the reading tracker: one row per registered account.

SQLAlchemy 2.0 Features Used:
- mapped_column(): Define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): Define relationships between models
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clookbook.database import Base

if TYPE_CHECKING:
    from clookbook.models.book import Book


class User(Base):
    """
    User model representing registered readers.

    Table: users

    Relationships:
    - books: One-to-Many relationship with Book (the books a user owns)

    Indexes:
    - Primary key on id (automatic)
    - email: Unique index for login lookups

    Example:
        user = User(
            email="reader@example.com",
            hashed_password=hash_password("secret123"),
        )
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Always stored trimmed and lowercased (see services.users.normalize_email)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User's email address (used for login)"
    )

    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        comment="When the user registered"
    )

    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="owner",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email='{self.email}')"

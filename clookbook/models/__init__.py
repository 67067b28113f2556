"""
SQLAlchemy Models Package

Model Relationships:
- User -> Book: One-to-Many (a user owns many books)
- Book -> ReadingSession: One-to-Many (a book has many logged sessions)

Import all models here so Alembic discovers them for migrations.
"""

from clookbook.models.user import User
from clookbook.models.book import Book
from clookbook.models.reading_session import ReadingSession

__all__ = [
    "User",
    "Book",
    "ReadingSession",
]

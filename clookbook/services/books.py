"""
Book and Reading Session Service

Ownership-scoped data access for the reading tracker.

Every book query filters on both the book id and the owner id, so a book
that belongs to another user is indistinguishable from one that does not
exist. Session queries only ever run against a book that was loaded through
get_owned_book().
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from clookbook.models import Book, ReadingSession

logger = logging.getLogger(__name__)


# =============================================================================
# Books
# =============================================================================

def list_books(db: Session, owner_id: int) -> list[Book]:
    """Return the owner's books, newest first."""
    stmt = (
        select(Book)
        .where(Book.owner_id == owner_id)
        .order_by(Book.created_at.desc(), Book.id.desc())
    )
    return list(db.execute(stmt).scalars().all())


def get_owned_book(db: Session, owner_id: int, book_id: int) -> Book | None:
    stmt = select(Book).where(Book.id == book_id, Book.owner_id == owner_id)
    return db.execute(stmt).scalar_one_or_none()


def create_book(db: Session, owner_id: int, title: str) -> Book:
    book = Book(owner_id=owner_id, title=title)
    db.add(book)
    db.commit()
    db.refresh(book)

    logger.info(f"Book created: id={book.id} owner={owner_id}")
    return book


def update_book(db: Session, book: Book, changes: dict[str, Any]) -> Book:
    """
    Apply a partial update to a book the caller already owns.

    Args:
        book: Book loaded through get_owned_book()
        changes: Field name to new value, only for fields the client sent
    """
    for field, value in changes.items():
        setattr(book, field, value)

    db.commit()
    db.refresh(book)

    logger.info(f"Book updated: id={book.id} fields={sorted(changes)}")
    return book


# =============================================================================
# Reading Sessions
# =============================================================================

def get_last_session(db: Session, book_id: int) -> ReadingSession | None:
    stmt = (
        select(ReadingSession)
        .where(ReadingSession.book_id == book_id)
        .order_by(ReadingSession.created_at.desc(), ReadingSession.id.desc())
        .limit(1)
    )
    return db.execute(stmt).scalars().first()


def list_sessions(db: Session, book_id: int) -> list[ReadingSession]:
    """Return every session logged for a book, newest first."""
    stmt = (
        select(ReadingSession)
        .where(ReadingSession.book_id == book_id)
        .order_by(ReadingSession.created_at.desc(), ReadingSession.id.desc())
    )
    return list(db.execute(stmt).scalars().all())


def create_session(
    db: Session,
    book_id: int,
    start_page: int | None = None,
    current_page: int | None = None,
    elapsed_ms: int | None = None,
) -> ReadingSession:
    session = ReadingSession(
        book_id=book_id,
        start_page=start_page,
        current_page=current_page,
        elapsed_ms=elapsed_ms,
    )
    db.add(session)
    db.commit()
    db.refresh(session)

    logger.info(f"Reading session logged: id={session.id} book={book_id}")
    return session

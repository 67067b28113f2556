#!/usr/bin/env python3
"""
Database Seed Script

Creates a demo reader with a few books and reading sessions for local
development.

USAGE:
    # From the project root, with DATABASE_URL and SECRET_KEY set
    python scripts/seed_data.py

Log in afterwards with demo@clookbook.dev / demo-password.
"""

from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from clookbook.database import SessionLocal, create_tables
from clookbook.models import Book, ReadingSession, User
from clookbook.services.users import EmailAlreadyRegisteredError, create_user, get_user_by_email

DEMO_EMAIL = "demo@clookbook.dev"
DEMO_PASSWORD = "demo-password"


def get_or_create_demo_user(db: Session) -> User:
    try:
        user = create_user(db, DEMO_EMAIL, DEMO_PASSWORD)
        print(f"Created demo user {DEMO_EMAIL}.")
        return user
    except EmailAlreadyRegisteredError:
        print(f"Demo user {DEMO_EMAIL} already exists, reusing it.")
        return get_user_by_email(db, DEMO_EMAIL)


def clear_books(db: Session, user: User) -> None:
    """Remove the demo user's books (sessions go with them)."""
    print("Clearing demo books...")
    for book in list(user.books):
        db.delete(book)
    db.commit()


def create_books(db: Session, user: User) -> list[Book]:
    print("Creating books...")
    now = datetime.now(UTC)

    books_data = [
        {"title": "The Left Hand of Darkness", "total_pages": 304, "days_ago": 20},
        {"title": "Piranesi", "total_pages": 272, "days_ago": 6},
        {"title": "The Dispossessed", "total_pages": None, "days_ago": None},
    ]

    books = []
    for data in books_data:
        days_ago = data.pop("days_ago")
        book = Book(
            owner_id=user.id,
            started_at=now - timedelta(days=days_ago) if days_ago is not None else None,
            **data,
        )
        db.add(book)
        books.append(book)

    db.commit()
    for book in books:
        db.refresh(book)

    print(f"Created {len(books)} books.")
    return books


def create_sessions(db: Session, books: list[Book]) -> list[ReadingSession]:
    """Log a few evening sessions against every book that has been started."""
    print("Creating reading sessions...")
    now = datetime.now(UTC)

    sessions = []
    for book in books:
        if book.started_at is None:
            continue

        page = 1
        for day in range(3, 0, -1):
            pages_read = 25 + 5 * day
            sessions.append(
                ReadingSession(
                    book_id=book.id,
                    start_page=page,
                    current_page=page + pages_read,
                    elapsed_ms=pages_read * 90_000,
                    created_at=now - timedelta(days=day),
                )
            )
            page += pages_read

    db.add_all(sessions)
    db.commit()

    print(f"Created {len(sessions)} reading sessions.")
    return sessions


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, removes the demo user's books first.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        user = get_or_create_demo_user(db)

        if clear_existing:
            clear_books(db, user)

        books = create_books(db, user)
        sessions = create_sessions(db, books)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - User: {user.email} (password: {DEMO_PASSWORD})")
        print(f"  - Books: {len(books)}")
        print(f"  - Reading sessions: {len(sessions)}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()

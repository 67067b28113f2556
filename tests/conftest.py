"""
pytest Fixtures for ClookBook API Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# This disables rate limiting and sets a test secret key
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"

from collections.abc import Generator
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from clookbook.database import Base, get_db
from clookbook.main import app
from clookbook.models import Book, ReadingSession, User
from clookbook.services.security import hash_password


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps tests fast and self-contained.
# StaticPool keeps the single connection alive, otherwise the in-memory
# database would disappear between connections.

@pytest.fixture(scope="session")
def engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    The client keeps cookies between requests, like a browser would.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a sample user with password "secret123"."""
    user = User(
        email="reader@example.com",
        hashed_password=hash_password("secret123"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def second_user(db_session: Session) -> User:
    """Create a second user for testing ownership scenarios."""
    user = User(
        email="other@example.com",
        hashed_password=hash_password("another-secret"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_book(db_session: Session, sample_user: User) -> Book:
    """Create a book owned by sample_user."""
    book = Book(owner_id=sample_user.id, title="The Left Hand of Darkness")
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def other_users_book(db_session: Session, second_user: User) -> Book:
    """Create a book owned by second_user."""
    book = Book(owner_id=second_user.id, title="Someone Else's Book")
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def sample_sessions(db_session: Session, sample_book: Book) -> list[ReadingSession]:
    """Two sessions on sample_book, the second one logged an hour later."""
    now = datetime.now(UTC)
    sessions = [
        ReadingSession(
            book_id=sample_book.id,
            start_page=1,
            current_page=20,
            elapsed_ms=900_000,
            created_at=now - timedelta(hours=1),
        ),
        ReadingSession(
            book_id=sample_book.id,
            start_page=20,
            current_page=45,
            elapsed_ms=1_200_000,
            created_at=now,
        ),
    ]
    db_session.add_all(sessions)
    db_session.commit()
    for session in sessions:
        db_session.refresh(session)
    return sessions

"""
Books Router

Endpoints for the authenticated user's own books.

Every endpoint requires authentication and only ever sees books owned by
the current user; anyone else's book answers 404 exactly like a missing one.

Endpoints:
- GET /books - List my books (newest first)
- POST /books - Add a book
- GET /books/{book_id} - A book with its latest reading session
- PUT /books/{book_id} - Partially update a book
"""

from fastapi import APIRouter, HTTPException, Request, status

from clookbook.config import get_settings
from clookbook.dependencies import CurrentUser, DbSession
from clookbook.models import Book
from clookbook.schemas import (
    BookCreate,
    BookDetailResponse,
    BookResponse,
    BookUpdate,
    ReadingSessionResponse,
)
from clookbook.services import books as book_service
from clookbook.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Book not found"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def get_book_or_404(db: DbSession, owner_id: int, book_id: int) -> Book:
    """
    Get a book owned by the given user or raise 404.

    Raises:
        HTTPException: 404 if the book does not exist or is not theirs
    """
    book = book_service.get_owned_book(db, owner_id, book_id)

    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book not found",
        )

    return book


# =============================================================================
# CRUD Endpoints
# =============================================================================

@router.get(
    "",
    response_model=list[BookResponse],
    summary="List my books",
    description="All books owned by the current user, most recently added first.",
)
def list_books(
    db: DbSession,
    current_user: CurrentUser,
) -> list[BookResponse]:
    books = book_service.list_books(db, current_user.id)
    return [BookResponse.model_validate(book) for book in books]


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a book",
    description="Create a book owned by the current user. Only the title is required.",
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    db: DbSession,
    current_user: CurrentUser,
) -> BookResponse:
    book = book_service.create_book(db, current_user.id, book_data.title)
    return BookResponse.model_validate(book)


@router.get(
    "/{book_id}",
    response_model=BookDetailResponse,
    summary="Get a book",
    description="Get one of my books together with its latest reading session.",
)
def get_book(
    book_id: int,
    db: DbSession,
    current_user: CurrentUser,
) -> BookDetailResponse:
    book = get_book_or_404(db, current_user.id, book_id)
    last_session = book_service.get_last_session(db, book.id)

    return BookDetailResponse(
        book=BookResponse.model_validate(book),
        last_session=(
            ReadingSessionResponse.model_validate(last_session)
            if last_session is not None
            else None
        ),
    )


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="""
    Partially update one of my books. Send only the fields to change.

    Updatable fields:
    - title (non-empty)
    - totalPages (positive number, fractions are floored)
    - startedAt (ISO date; null or "" clears it)
    """,
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: int,
    book_data: BookUpdate,
    db: DbSession,
    current_user: CurrentUser,
) -> BookResponse:
    changes = book_data.model_dump(exclude_unset=True)

    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No updatable fields provided",
        )

    book = get_book_or_404(db, current_user.id, book_id)
    book = book_service.update_book(db, book, changes)

    return BookResponse.model_validate(book)

"""
Reading Sessions Router

Reading sessions are nested under the book they belong to. The book is
always loaded through the ownership check first, so sessions of another
user's book can be neither read nor written.

Endpoints:
- POST /books/{book_id}/sessions - Log a reading session
- GET /books/{book_id}/sessions - List sessions (newest first)
"""

from fastapi import APIRouter, Request, status

from clookbook.config import get_settings
from clookbook.dependencies import CurrentUser, DbSession
from clookbook.routers.books import get_book_or_404
from clookbook.schemas import ReadingSessionCreate, ReadingSessionResponse
from clookbook.services import books as book_service
from clookbook.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/books/{book_id}/sessions",
    tags=["Reading Sessions"],
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Book not found"},
    },
)


@router.post(
    "",
    response_model=ReadingSessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log a reading session",
    description="Record start page, current page and elapsed time against one of my books.",
)
@limiter.limit(settings.rate_limit_write)
def create_session(
    request: Request,
    book_id: int,
    session_data: ReadingSessionCreate,
    db: DbSession,
    current_user: CurrentUser,
) -> ReadingSessionResponse:
    book = get_book_or_404(db, current_user.id, book_id)

    session = book_service.create_session(
        db,
        book.id,
        start_page=session_data.start_page,
        current_page=session_data.current_page,
        elapsed_ms=session_data.elapsed_ms,
    )

    return ReadingSessionResponse.model_validate(session)


@router.get(
    "",
    response_model=list[ReadingSessionResponse],
    summary="List reading sessions",
    description="All sessions logged against one of my books, newest first.",
)
def list_sessions(
    book_id: int,
    db: DbSession,
    current_user: CurrentUser,
) -> list[ReadingSessionResponse]:
    book = get_book_or_404(db, current_user.id, book_id)
    sessions = book_service.list_sessions(db, book.id)
    return [ReadingSessionResponse.model_validate(s) for s in sessions]

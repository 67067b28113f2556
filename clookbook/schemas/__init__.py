"""
Pydantic Schemas Package

Request/response validation, kept separate from the SQLAlchemy models so the
API controls exactly what is exposed.

Schema Naming Convention:
- XxxCreate: Fields accepted when creating a record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from clookbook.schemas.book import (
    BookCreate,
    BookDetailResponse,
    BookResponse,
    BookUpdate,
)
from clookbook.schemas.common import CamelModel, OkResponse
from clookbook.schemas.reading_session import (
    ReadingSessionCreate,
    ReadingSessionResponse,
)
from clookbook.schemas.user import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    SignupRequest,
    UserResponse,
)

__all__ = [
    "CamelModel",
    "OkResponse",
    # Book schemas
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookDetailResponse",
    # Reading session schemas
    "ReadingSessionCreate",
    "ReadingSessionResponse",
    # User/auth schemas
    "SignupRequest",
    "LoginRequest",
    "AuthResponse",
    "UserResponse",
    "MeResponse",
]

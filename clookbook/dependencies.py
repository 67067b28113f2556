"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Provided here:
- DbSession: per-request database session
- CurrentUser: the authenticated user, resolved from the identity token
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from clookbook.config import get_settings
from clookbook.database import get_db
from clookbook.models.user import User
from clookbook.services.security import verify_token_type
from clookbook.services.users import get_user_by_id

logger = logging.getLogger(__name__)
settings = get_settings()

# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
# routes write:
#   def list_books(db: DbSession):
DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Identity Token Extraction
# =============================================================================
# Browsers carry the token in an httpOnly cookie set at login. Scripts and
# other non-browser clients may send "Authorization: Bearer <token>" instead.
# Both schemes use auto_error=False so get_current_user decides the response.

cookie_scheme = APIKeyCookie(
    name=settings.auth_cookie_name,
    auto_error=False,
    description="Identity token set by /auth/login and /auth/signup",
)

bearer_scheme = HTTPBearer(
    auto_error=False,
    description="Identity token for non-browser clients",
)


def get_token(
    cookie_token: str | None = Depends(cookie_scheme),
    bearer: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """Return the identity token from the cookie, else the Bearer header."""
    if cookie_token:
        return cookie_token
    if bearer is not None and bearer.credentials:
        return bearer.credentials
    return None


def get_current_user(
    request: Request,
    db: DbSession,
    token: str | None = Depends(get_token),
) -> User:
    """
    Resolve the authenticated user for this request.

    1. Reject the request if no token was sent
    2. Verify the token signature, expiry and type
    3. Look up the user named by the token's subject
    4. Bind the user id to request.state for logging and downstream use

    Raises:
        HTTPException: 401 "Unauthorized" if no token was sent,
            401 "Invalid token" if it fails verification or names no user
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    invalid_token = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = verify_token_type(token)
    if payload is None:
        raise invalid_token

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        logger.warning("Token rejected: missing or malformed subject")
        raise invalid_token from None

    user = get_user_by_id(db, user_id)
    if user is None:
        logger.warning(f"Token rejected: user {user_id} no longer exists")
        raise invalid_token

    request.state.user_id = user.id
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]

"""
Authentication Router

Handles user authentication endpoints:
- Signup (email/password → account + identity cookie)
- Login (email/password → identity cookie)
- Logout (clear identity cookie)

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords and tokens are never logged
- The identity token travels in an httpOnly, SameSite=Lax cookie
- Unknown email and wrong password produce the same 401 response
"""

import logging

from fastapi import APIRouter, HTTPException, Request, Response, status

from clookbook.config import get_settings
from clookbook.dependencies import DbSession
from clookbook.models.user import User
from clookbook.schemas.common import OkResponse
from clookbook.schemas.user import AuthResponse, LoginRequest, SignupRequest
from clookbook.services.rate_limiter import limiter
from clookbook.services.security import create_access_token
from clookbook.services.users import (
    EmailAlreadyRegisteredError,
    authenticate_user,
    create_user,
)

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={
        400: {"description": "Bad request"},
        401: {"description": "Invalid credentials"},
        409: {"description": "Email already registered"},
    },
)


# -------------------------------------------------------------------------
# Cookie Helpers
# -------------------------------------------------------------------------
def set_auth_cookie(response: Response, user: User) -> None:
    """Issue an identity token for the user and store it in the auth cookie."""
    token = create_access_token({"sub": str(user.id)})
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        httponly=True,  # Not accessible via JavaScript
        secure=settings.is_production,  # HTTPS only in production
        samesite="lax",
        max_age=settings.access_token_max_age,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.auth_cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


# -------------------------------------------------------------------------
# Signup Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description=f"""
    Create a new account with email and password and log it in.

    **Requirements:**
    - A valid email address (stored lowercased)
    - A password of at least {settings.min_password_length} characters

    The identity token is returned in the `{settings.auth_cookie_name}` cookie.
    """,
)
@limiter.limit(settings.rate_limit_auth)
def signup(
    request: Request,
    response: Response,
    user_data: SignupRequest,
    db: DbSession,
) -> AuthResponse:
    """
    Register a new user.

    1. Validates email and password (handled by Pydantic)
    2. Rejects an email that already has an account
    3. Hashes the password and creates the user
    4. Logs the new user in by setting the identity cookie
    """
    try:
        user = create_user(db, user_data.email, user_data.password)
    except EmailAlreadyRegisteredError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        ) from None

    set_auth_cookie(response, user)

    return AuthResponse(uid=user.id, email=user.email)


# -------------------------------------------------------------------------
# Login Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login with email and password",
    description=f"""
    Authenticate with email and password.

    On success the identity token is set in the httpOnly
    `{settings.auth_cookie_name}` cookie. Non-browser clients may instead
    read that cookie and send it as `Authorization: Bearer <token>`.
    """,
)
@limiter.limit(settings.rate_limit_auth)
def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    db: DbSession,
) -> AuthResponse:
    """Authenticate a user and set the identity cookie."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if user is None:
        logger.warning("Login failed: invalid credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    set_auth_cookie(response, user)

    logger.info(f"User logged in: id={user.id}")

    return AuthResponse(uid=user.id, email=user.email)


# -------------------------------------------------------------------------
# Logout Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/logout",
    response_model=OkResponse,
    summary="Logout user",
    description="""
    Clear the identity cookie.

    **Note:** Tokens are stateless. A copy of the token kept elsewhere stays
    valid until it expires.
    """,
)
def logout(response: Response) -> OkResponse:
    clear_auth_cookie(response)
    logger.info("User logged out")
    return OkResponse()

"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Tests build the app the same way uvicorn does

2. Middleware Stack
   - Rate limiting (slowapi)
   - CORS: credentialed requests from the configured origins

3. Exception Handlers
   - Request validation errors become a single 400 message
   - Database errors become a generic 500
   - Every error body has the same {"detail": ...} shape
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError

from clookbook.config import get_settings
from clookbook.routers import auth_router, books_router, sessions_router, users_router
from clookbook.schemas.common import OkResponse
from clookbook.services.rate_limiter import limiter, rate_limit_exceeded_handler

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug: {settings.debug}")
    logger.info(f"API mounted at {settings.api_prefix}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


def validation_error_message(exc: RequestValidationError) -> str:
    """
    Reduce a pydantic validation failure to one human-readable message.

    Messages raised by our own validators are returned as written; anything
    else is prefixed with the offending field name.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    ctx = error.get("ctx") or {}

    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])

    loc = error.get("loc") or ()
    field = loc[-1] if loc else None
    if field is None or field == "body":
        return str(error.get("msg", "Invalid request"))

    return f"{field}: {error.get('msg')}"


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## ClookBook API

Track the books you are reading and time your reading sessions.

### Features
- **Accounts**: Sign up, log in and log out
- **Books**: Add and update the books you are reading
- **Reading sessions**: Log pages read and time spent per book

### Authentication
Signup and login set an httpOnly identity cookie. Non-browser clients may
send the same token as `Authorization: Bearer <token>`.
        """,
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    # Credentials must be allowed for the identity cookie to cross origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        message = validation_error_message(exc)
        logger.info(f"Rejected {request.method} {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": message},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error while hiding details from clients.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "A database error occurred. Please try again later."
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In debug mode the exception text is returned to the client.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    api_prefix = settings.api_prefix

    app.include_router(auth_router, prefix=api_prefix)
    app.include_router(users_router, prefix=api_prefix)
    app.include_router(books_router, prefix=api_prefix)
    app.include_router(sessions_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        f"{api_prefix}/health",
        response_model=OkResponse,
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running.",
    )
    async def health_check() -> OkResponse:
        return OkResponse()

    return app


# =============================================================================
# Application Instance
# =============================================================================
# uvicorn clookbook.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m clookbook.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "clookbook.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )

"""
Rate Limiting Service

Implements rate limiting using slowapi to protect the API from abuse,
especially credential stuffing against the login endpoint.

Rate Limit Tiers:
=================
- Default: settings.rate_limit_default (every endpoint)
- Auth (signup/login): settings.rate_limit_auth
- Writes (create/update): settings.rate_limit_write

Storage defaults to in-process memory; point RATE_LIMIT_STORAGE_URI at
redis:// to share counters between API instances.
"""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from clookbook.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """
    Get client IP address for rate limiting.

    X-Forwarded-For and X-Real-IP are only honoured when
    settings.trust_proxy_headers is on; otherwise the direct connection IP
    is used.
    """
    if not settings.trust_proxy_headers:
        return get_remote_address(request)

    # X-Forwarded-For can contain multiple IPs; first is the client
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    """Create and configure the rate limiter."""
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri=settings.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter initialized - enabled: {settings.rate_limit_enabled}, "
        f"default: {settings.rate_limit_default}"
    )

    return limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Custom handler for rate limit exceeded errors.

    Returns 429 with a Retry-After header and the error in the same
    {"detail": ...} shape as every other API error.
    """
    limit_detail = str(exc.detail)

    response = JSONResponse(
        status_code=429,
        content={"detail": f"Too many requests: {limit_detail}"},
    )
    response.headers["Retry-After"] = "60"
    response.headers["X-RateLimit-Limit"] = limit_detail

    logger.warning(
        f"Rate limit exceeded for {get_client_ip(request)}: {limit_detail}"
    )

    return response

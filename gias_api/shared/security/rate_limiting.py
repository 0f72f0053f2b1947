"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-route rate limit on every endpoint.
The limit is applied by SlowAPIMiddleware, which reads the limiter from
``app.state.limiter``.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from gias_api.core.config import settings


def build_limiter(default_limit: str) -> Limiter:
    """Build a limiter keyed on client address with one default limit.

    Args:
        default_limit: A slowapi limit string such as "60/minute".
    """
    return Limiter(key_func=get_remote_address, default_limits=[default_limit])


limiter = build_limiter(settings.rate_limit_default)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Kept synchronous: SlowAPIMiddleware calls it without awaiting.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the ErrorResponse shape.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )

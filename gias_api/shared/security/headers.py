"""
Response headers middleware.

The API only ever returns JSON, so every response is locked down to
"no active content, no framing, no caching" and stamped with the API
version so consumers can tell which build answered them.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

API_VERSION_HEADER = "X-API-Version"

JSON_API_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


class ApiResponseHeadersMiddleware(BaseHTTPMiddleware):
    """Adds JSON API hardening headers and the API version to responses.

    Headers already set by a route are left untouched.
    """

    def __init__(self, app: ASGIApp, api_version: str) -> None:
        super().__init__(app)
        self._headers = {**JSON_API_HEADERS, API_VERSION_HEADER: api_version}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in self._headers.items():
            response.headers.setdefault(header_name, header_value)
        return response

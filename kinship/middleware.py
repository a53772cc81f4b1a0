"""Double-submit CSRF protection.

Every response carries a ``kinship_csrf`` cookie (issued when the request had
none). State-changing requests must echo that cookie in the ``x-csrf-token``
header; anything else is rejected with 403 before reaching a route.
"""

from __future__ import annotations

import secrets

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

CSRF_COOKIE_NAME = "kinship_csrf"
CSRF_HEADER_NAME = "x-csrf-token"
_CSRF_TOKEN_LENGTH = 32
_CSRF_SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def _ensure_csrf_cookie(request: Request, response: Response) -> None:
    """Set the CSRF cookie if not already present so JS can read it."""
    if request.cookies.get(CSRF_COOKIE_NAME):
        return
    token = secrets.token_hex(_CSRF_TOKEN_LENGTH)
    response.set_cookie(
        key=CSRF_COOKIE_NAME,
        value=token,
        httponly=False,  # JS must be able to read it.
        samesite="lax",
        path="/",
    )


def _csrf_ok(request: Request) -> bool:
    cookie = request.cookies.get(CSRF_COOKIE_NAME, "")
    header = request.headers.get(CSRF_HEADER_NAME, "")
    return bool(cookie) and bool(header) and secrets.compare_digest(cookie.encode(), header.encode())


class CSRFMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method not in _CSRF_SAFE_METHODS and not _csrf_ok(request):
            return JSONResponse({"detail": "CSRF token mismatch"}, status_code=403)

        response = await call_next(request)
        _ensure_csrf_cookie(request, response)
        return response

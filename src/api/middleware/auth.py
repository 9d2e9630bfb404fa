"""Shared-secret authentication middleware."""

import logging
import os

from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

# Shared secret compared verbatim against the Authorization header (no "Bearer" prefix).
API_TOKEN = os.getenv("API_TOKEN", "valid-token")

MISSING_TOKEN_MESSAGE = "Authorization token is missing."
INVALID_TOKEN_MESSAGE = "Invalid authorization token."


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Reject requests whose Authorization header is absent or wrong.

    Short-circuits with a plain-text 401; downstream stages never see
    unauthenticated requests.
    """

    def __init__(self, app: ASGIApp, token: str = API_TOKEN):
        super().__init__(app)
        self.token = token

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        token = request.headers.get("Authorization")
        if token is None:
            logger.warning("Request without authorization token", extra={"path": request.url.path})
            return PlainTextResponse(MISSING_TOKEN_MESSAGE, status_code=status.HTTP_401_UNAUTHORIZED)

        if token != self.token:
            logger.warning("Invalid authorization token", extra={"path": request.url.path})
            return PlainTextResponse(INVALID_TOKEN_MESSAGE, status_code=status.HTTP_401_UNAUTHORIZED)

        return await call_next(request)

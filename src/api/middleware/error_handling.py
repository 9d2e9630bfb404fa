"""Catch-all error middleware."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.models import InternalErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error."


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn any exception raised downstream into a generic JSON 500."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("An unhandled exception occurred.", extra={
                "method": request.method,
                "path": request.url.path,
            })
            return JSONResponse(
                content=InternalErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump(),
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

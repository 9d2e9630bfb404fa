"""Request/response logging middleware."""

import logging

from fastapi import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger(__name__)


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request line and the full response it produced.

    The downstream body is buffered so it can be logged, then written
    back out unchanged.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        logger.info(f"Incoming request: {request.method} {request.url.path}", extra={
            "method": request.method,
            "path": request.url.path,
        })

        response = await call_next(request)

        body = b"".join([chunk async for chunk in response.body_iterator])
        response_text = body.decode("utf-8", errors="replace")

        logger.info(f"Outgoing response: {response.status_code} {response_text}", extra={
            "status_code": response.status_code,
            "path": request.url.path,
        })

        rebuilt = Response(
            content=body,
            status_code=response.status_code,
            background=response.background,
        )
        # Raw list keeps repeated headers (Set-Cookie) and their order
        rebuilt.raw_headers = [
            (key, value) for key, value in response.raw_headers if key != b"content-length"
        ] + [(b"content-length", str(len(body)).encode("latin-1"))]
        return rebuilt

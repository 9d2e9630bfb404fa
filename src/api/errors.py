"""Error surface: translate failures into HTTP responses.

- DomainError subclasses raised by services → 400/404 ``{"Message": ...}``
- Request binding failures (missing/malformed body, bad path or query
  values) → 400 ``{"Message": ...}``
- Faults that escape the middleware chain → problem details body,
  remembered on ``app.state.last_error`` for the ``/error`` route
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models import ErrorMessage, ProblemResponse
from domain.model.errors import DomainError, NotFoundError, ValidationError
from domain.model.validation import REQUIRED_FIELDS_MESSAGE

logger = logging.getLogger(__name__)

PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.6.1"
PROBLEM_TITLE = "An error occurred while processing your request."
PROBLEM_MEDIA_TYPE = "application/problem+json"

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: DomainError) -> int:
    """Return the HTTP status for a domain error (500 if unmapped)."""
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info("Domain error", extra={
        "path": request.url.path,
        "status_code": status_code,
        "error": str(exc),
    })
    return JSONResponse(
        content=ErrorMessage(Message=str(exc)).model_dump(),
        status_code=status_code,
    )


def problem_response(detail: str | None) -> JSONResponse:
    """Build a 500 problem details response."""
    problem = ProblemResponse(
        type=PROBLEM_TYPE,
        title=PROBLEM_TITLE,
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )
    return JSONResponse(
        content=problem.model_dump(),
        status_code=problem.status,
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for faults not absorbed by the error-handling middleware."""
    request.app.state.last_error = exc
    logger.error("Unhandled exception escaped middleware", exc_info=exc, extra={
        "method": request.method,
        "path": request.url.path,
    })
    return problem_response(str(exc))


def binding_error_message(exc: RequestValidationError) -> str:
    """Pick the client-facing message for a request that failed to bind.

    Any body error means the user payload is unusable, which is reported
    like missing fields. Otherwise the first bad path/query parameter is named.
    """
    errors = exc.errors()
    if not errors or any(err["loc"] and err["loc"][0] == "body" for err in errors):
        return REQUIRED_FIELDS_MESSAGE
    loc = errors[0]["loc"]
    return f"Invalid value for '{loc[-1]}'"


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = binding_error_message(exc)
    logger.info("Request binding failed", extra={
        "path": request.url.path,
        "status_code": status.HTTP_400_BAD_REQUEST,
        "error": message,
    })
    return JSONResponse(
        content=ErrorMessage(Message=message).model_dump(),
        status_code=status.HTTP_400_BAD_REQUEST,
    )

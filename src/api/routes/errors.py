"""Diagnostic route exposing the last fault caught by the app-level handler."""

from fastapi import APIRouter, Request

from api.errors import problem_response
from api.models import ProblemResponse

router = APIRouter(tags=["meta"])

# Mapped for every method so any re-dispatched request can render the fault
ERROR_ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/error", methods=ERROR_ROUTE_METHODS, response_model=ProblemResponse)
async def error(request: Request):
    """Render the last unhandled fault as a problem details body."""
    exc = getattr(request.app.state, "last_error", None)
    return problem_response(str(exc) if exc is not None else None)

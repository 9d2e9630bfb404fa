"""Request pipeline composition.

Every request passes through the stages in list order (outermost first)
before reaching the router; responses travel back in reverse:

    Authentication → Logging → Error handling → route handler

Any stage may answer directly instead of forwarding.
"""

from typing import Any, NamedTuple

from fastapi import FastAPI

from api.middleware.auth import AuthenticationMiddleware
from api.middleware.error_handling import ErrorHandlingMiddleware
from api.middleware.request_logging import RequestResponseLoggingMiddleware


class Stage(NamedTuple):
    """One named step of the request pipeline."""
    name: str
    middleware: type
    options: dict[str, Any]


def build_pipeline(api_token: str) -> list[Stage]:
    """Return the fixed, ordered list of pipeline stages."""
    return [
        Stage("authentication", AuthenticationMiddleware, {"token": api_token}),
        Stage("logging", RequestResponseLoggingMiddleware, {}),
        Stage("error_handling", ErrorHandlingMiddleware, {}),
    ]


def install_pipeline(app: FastAPI, stages: list[Stage]) -> None:
    """Register stages on the app so that stages[0] is the outermost.

    Starlette wraps the most recently added middleware around the rest,
    so stages are added in reverse.
    """
    for stage in reversed(stages):
        app.add_middleware(stage.middleware, **stage.options)

"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from pathlib import Path
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars (like auth middleware)
load_dotenv()

# Add src to path
# main.py is at src/api/main.py, so src is 2 levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.errors import (
    domain_error_handler,
    request_validation_error_handler,
    unhandled_exception_handler,
)
from api.middleware.auth import API_TOKEN
from api.middleware.pipeline import build_pipeline, install_pipeline
from api.routes import errors, users
from domain.model.errors import DomainError
from utils.logging import setup_structured_logging

# Set up structured JSON logging
setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "User Management API"

HTTPS_REDIRECT = os.getenv("HTTPS_REDIRECT", "false").lower() in ("1", "true", "yes")


def create_app(api_token: str = API_TOKEN, https_redirect: bool = HTTPS_REDIRECT) -> FastAPI:
    """Build the app: routes, error handlers and the request pipeline."""
    app = FastAPI(
        title=SERVICE_NAME,
        description="CRUD API over an in-memory collection of users",
        version=VERSION,
    )
    app.state.last_error = None

    # Services raise DomainError; translated to 400/404 in one place
    app.add_exception_handler(DomainError, domain_error_handler)
    # Unbindable bodies and path/query values answer 400 like the validation rules
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    # Only reached by faults that escape the error-handling middleware
    app.add_exception_handler(Exception, unhandled_exception_handler)

    install_pipeline(app, build_pipeline(api_token))

    if https_redirect:
        # Added last so it wraps the whole pipeline
        app.add_middleware(HTTPSRedirectMiddleware)
        logger.info("HTTPS redirection enabled")

    app.include_router(users.router)
    app.include_router(errors.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    # The request logging middleware already records every request/response
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )

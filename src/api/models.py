"""Pydantic models for API request/response."""

from typing import Optional
from pydantic import BaseModel, Field


class UserRequest(BaseModel):
    """Request body for creating or updating a user.

    Both fields are optional at the schema level so that missing values
    reach the validation rules and produce a 400 instead of a 422.
    Any ``id`` sent by the client is ignored.
    """
    name: Optional[str] = None
    email: Optional[str] = None


class UserResponse(BaseModel):
    """Response model for a stored user."""
    id: int = Field(..., description="Server-assigned user ID")
    name: str
    email: str


class ErrorMessage(BaseModel):
    """Body of 400/404 responses."""
    Message: str


class InternalErrorResponse(BaseModel):
    """Body written by the error-handling middleware."""
    error: str


class ProblemResponse(BaseModel):
    """Problem details body produced for faults that escape the middleware chain."""
    type: str
    title: str
    status: int
    detail: Optional[str] = None

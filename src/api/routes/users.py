"""User CRUD routes.

Endpoints:
- GET /users: List users (page/pageSize pagination)
- GET /users/{user_id}: Get one user
- POST /users: Create a user
- PUT /users/{user_id}: Replace a user's name and email
- DELETE /users/{user_id}: Delete a user

Services raise DomainError subclasses; api.errors maps them to 400/404.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from api.dependencies import get_user_repo
from api.models import ErrorMessage, UserRequest, UserResponse
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorMessage}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorMessage}}


@router.get("", response_model=list[UserResponse])
async def list_users(
    page: int = Query(user_service.DEFAULT_PAGE),
    page_size: int = Query(user_service.DEFAULT_PAGE_SIZE, alias="pageSize"),
    repo: UserRepository = Depends(get_user_repo),
):
    """List users in insertion order, one page at a time."""
    users = user_service.list_users(repo, page=page, page_size=page_size)
    return [UserResponse(**asdict(u)) for u in users]


@router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
async def get_user(user_id: int, repo: UserRepository = Depends(get_user_repo)):
    """Get a single user by ID."""
    user = user_service.get_user(repo, user_id)
    return UserResponse(**asdict(user))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
async def create_user(request: UserRequest, repo: UserRepository = Depends(get_user_repo)):
    """Create a user. Responds with the stored user and its Location."""
    user = user_service.create_user(repo, name=request.name, email=request.email)
    return JSONResponse(
        content=UserResponse(**asdict(user)).model_dump(),
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/users/{user.id}"},
    )


@router.put("/{user_id}", response_model=str, responses={**_NOT_FOUND, **_BAD_REQUEST})
async def update_user(
    user_id: int,
    request: UserRequest,
    repo: UserRepository = Depends(get_user_repo),
):
    """Replace a user's name and email. The ID never changes."""
    return user_service.update_user(repo, user_id, name=request.name, email=request.email)


@router.delete("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
async def delete_user(user_id: int, repo: UserRepository = Depends(get_user_repo)):
    """Delete a user and return the removed record."""
    removed = user_service.delete_user(repo, user_id)
    return UserResponse(**asdict(removed))
